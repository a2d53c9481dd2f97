"""Tests for time_calculator: wake-up arithmetic and duration copy."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from time_calculator import (
    departure_time,
    format_clock_time,
    format_duration,
    format_duration_readable,
    subtract_duration,
    wake_up_time,
)


class TestWakeUpTime:
    def test_subtracts_prep_and_travel(self, arrival):
        assert wake_up_time(arrival, 1800, 1200) == datetime(2026, 3, 9, 8, 10)

    @pytest.mark.parametrize("prep,travel", [(0, 0), (1800, 1200), (45, 5400), (7200, 0)])
    def test_matches_sequential_subtraction(self, arrival, prep, travel):
        expected = arrival - timedelta(seconds=prep) - timedelta(seconds=travel)
        assert wake_up_time(arrival, prep, travel) == expected

    def test_can_land_in_the_past(self):
        arrival = datetime(2026, 3, 9, 0, 15)
        assert wake_up_time(arrival, 1800, 1200) == datetime(2026, 3, 8, 23, 25)


class TestDepartureTime:
    def test_subtracts_travel(self, arrival):
        assert departure_time(arrival, 1200) == datetime(2026, 3, 9, 8, 40)

    def test_zero_travel_leaves_at_arrival(self, arrival):
        assert departure_time(arrival, 0) == arrival

    def test_negative_travel_moves_later(self, arrival):
        assert departure_time(arrival, -600) == datetime(2026, 3, 9, 9, 10)


LOS_ANGELES = ZoneInfo("America/Los_Angeles")


class TestZonedInstants:
    def test_wake_up_across_spring_forward(self):
        arrival = datetime(2026, 3, 8, 3, 30, tzinfo=LOS_ANGELES)
        wake = wake_up_time(arrival, 1800, 1200)
        assert arrival.timestamp() - wake.timestamp() == 3000
        assert (wake.hour, wake.minute) == (1, 40)
        assert wake.utcoffset() == timedelta(hours=-8)

    def test_departure_across_spring_forward(self):
        arrival = datetime(2026, 3, 8, 3, 30, tzinfo=LOS_ANGELES)
        leave = departure_time(arrival, 1800)
        assert arrival.timestamp() - leave.timestamp() == 1800
        assert (leave.hour, leave.minute) == (3, 0)

    def test_wake_up_across_fall_back(self):
        arrival = datetime(2026, 11, 1, 2, 30, tzinfo=LOS_ANGELES)
        wake = wake_up_time(arrival, 1800, 1200)
        assert arrival.timestamp() - wake.timestamp() == 3000
        assert (wake.hour, wake.minute, wake.fold) == (1, 40, 1)
        assert wake.utcoffset() == timedelta(hours=-8)

    def test_departure_across_fall_back(self):
        arrival = datetime(2026, 11, 1, 2, 0, tzinfo=LOS_ANGELES)
        leave = departure_time(arrival, 5400)
        assert arrival.timestamp() - leave.timestamp() == 5400
        assert (leave.hour, leave.minute, leave.fold) == (1, 30, 0)
        assert leave.utcoffset() == timedelta(hours=-7)

    def test_keeps_the_arrival_zone(self):
        arrival = datetime(2026, 3, 9, 9, 0, tzinfo=LOS_ANGELES)
        assert wake_up_time(arrival, 600, 600).tzinfo is LOS_ANGELES

    def test_fixed_offset_matches_plain_subtraction(self):
        arrival = datetime(2026, 3, 9, 9, 0, tzinfo=timezone.utc)
        assert subtract_duration(arrival, 90) == arrival - timedelta(seconds=90)


class TestFormatDuration:
    @pytest.mark.parametrize("seconds,expected", [
        (0, "0m"),
        (59, "0m"),
        (90, "1m"),
        (1800, "30m"),
        (3599, "59m"),
        (3600, "1h"),
        (5400, "1h 30m"),
        (7200, "2h"),
        (9000.5, "2h 30m"),
    ])
    def test_short_form(self, seconds, expected):
        assert format_duration(seconds) == expected

    def test_is_repeatable(self):
        assert format_duration(5400) == format_duration(5400)


class TestFormatDurationReadable:
    @pytest.mark.parametrize("seconds,expected", [
        (0, "0 min"),
        (60, "1 min"),
        (1800, "30 min"),
        (3600, "1 hour"),
        (5400, "1 hour 30 min"),
        (7200, "2 hours"),
        (8100, "2 hours 15 min"),
    ])
    def test_conversational_form(self, seconds, expected):
        assert format_duration_readable(seconds) == expected

    def test_minutes_are_never_pluralized(self):
        assert format_duration_readable(120) == "2 min"
        assert format_duration_readable(3720) == "1 hour 2 min"

    def test_is_repeatable(self):
        assert format_duration_readable(5400) == format_duration_readable(5400)


def test_format_clock_time():
    assert format_clock_time(datetime(2026, 3, 9, 7, 5)) == "07:05 AM"
    assert format_clock_time(datetime(2026, 3, 9, 17, 45)) == "05:45 PM"
