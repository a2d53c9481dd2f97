# Main script to plan the alarms needed to arrive somewhere on time.

import argparse
import asyncio
import logging
import math
import os
import sys
from datetime import date, datetime, time, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

import sound_catalog
from api_adapters import make_adapter
from api_structures import GeoPoint, TrafficStatus, TransportMode
from departure import Departure, Preferences, refresh_travel_time
from time_calculator import format_clock_time, format_duration, format_duration_readable
from travel_estimator import router_from_adapter

logger = logging.getLogger("ontime_alarm")


def load_timezone() -> ZoneInfo:
    name = os.getenv("ALARM_TZ", "America/Los_Angeles")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(
            f"The timezone '{name}' set in the ALARM_TZ environment variable is invalid. "
            "Please use a valid IANA timezone name (e.g., 'America/New_York', 'Europe/London').") from None


def parse_arrival(arrive: str, on: str | None, tz: ZoneInfo, now: datetime | None = None) -> datetime:
    """
    Combines an 'HH:MM' arrival time with an optional 'YYYY-MM-DD' date.
    Without a date, the next occurrence of that time is used.
    """
    try:
        arrival_clock = time.fromisoformat(arrive)
    except ValueError:
        raise ValueError(f"Arrival time must look like HH:MM, got {arrive!r}") from None

    if on:
        try:
            day = date.fromisoformat(on)
        except ValueError:
            raise ValueError(f"Date must look like YYYY-MM-DD, got {on!r}") from None
        return datetime.combine(day, arrival_clock, tzinfo=tz)

    now = now or datetime.now(tz)
    arrival = datetime.combine(now.date(), arrival_clock, tzinfo=tz)
    if arrival <= now:
        arrival += timedelta(days=1)
    return arrival


def build_departure(args: argparse.Namespace, preferences: Preferences, tz: ZoneInfo) -> Departure:
    overrides = {
        "has_pre_wake_alarm": not args.no_pre_wake,
        "sound_id": args.sound,
    }
    if args.prep is not None:
        overrides["prep_duration"] = args.prep * 60
    if args.travel is not None:
        overrides["static_travel_time"] = args.travel * 60
    if args.mode is not None:
        overrides["transport_mode"] = TransportMode.parse(args.mode)
    if args.origin:
        overrides["origin"] = GeoPoint.parse(args.origin)
    if args.destination:
        overrides["destination"] = GeoPoint.parse(args.destination)

    arrival = parse_arrival(args.arrive, args.date, tz)
    return Departure.from_preferences(args.label, arrival, preferences, **overrides)


def display_plan(departure: Departure, traffic: TrafficStatus):
    """Formats and prints the alarm plan for a departure."""
    mode = departure.transport_mode
    print(f"\nAlarm plan for '{departure.label}'")
    print(f"Arrive by {format_clock_time(departure.target_arrival_time)} on "
          f"{departure.target_arrival_time.strftime('%A, %B %d, %Y')}\n")

    if departure.live_travel_time is not None:
        print(f"Live estimate: {format_duration(departure.live_travel_time)} {mode.verb} "
              f"(traffic: {traffic.value})")
    else:
        print(f"Using static travel time: {format_duration(departure.static_travel_time)} {mode.verb}")

    divider = "-" * 44
    print(divider)
    if departure.pre_wake_time is not None:
        print(f"| {'Pre-wake':<10} | {format_clock_time(departure.pre_wake_time):<8} | {'5 min heads-up':<16} |")
    print(f"| {'Wake up':<10} | {format_clock_time(departure.wake_up_time):<8} | "
          f"{format_duration(departure.prep_duration) + ' prep':<16} |")
    print(f"| {'Leave':<10} | {format_clock_time(departure.departure_time):<8} | "
          f"{format_duration(departure.effective_travel_time) + ' ' + mode.verb:<16} |")
    print(f"| {'Arrive':<10} | {format_clock_time(departure.target_arrival_time):<8} | {'':<16} |")
    print(divider)

    print(f"\nYou have {format_duration_readable(departure.prep_duration)} to get ready and "
          f"{format_duration_readable(departure.effective_travel_time)} of {mode.verb}.")
    print(f"{departure.total_alarm_count} alarms, sound: {sound_catalog.display_name(departure.sound_id)}")


def minutes_arg(text: str) -> float:
    try:
        minutes = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number of minutes: {text!r}") from None
    if not math.isfinite(minutes) or minutes < 0:
        raise argparse.ArgumentTypeError(f"minutes must be a finite, non-negative number: {text!r}")
    return minutes


def make_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="OnTime Alarm: work out when to wake up and when to leave.")
    parser.add_argument('--arrive', required=True, help="Arrival deadline as HH:MM.")
    parser.add_argument('--date', help="Arrival date as YYYY-MM-DD (default: next occurrence).")
    parser.add_argument('--label', default="Untitled", help="Name for this departure.")
    parser.add_argument('--prep', type=minutes_arg, help="Preparation time in minutes.")
    parser.add_argument('--travel', type=minutes_arg, help="Static travel time in minutes.")
    parser.add_argument('--from', dest='origin', help="Origin as LAT,LON.")
    parser.add_argument('--to', dest='destination', help="Destination as LAT,LON.")
    parser.add_argument('--mode', choices=[m.value for m in TransportMode], help="Transport mode.")
    parser.add_argument('--api', default='google', help="Routing API: google (default) or tomtom.")
    parser.add_argument('--sound', default=sound_catalog.NotificationSound.DEFAULT.value,
                        help="Notification sound identifier.")
    parser.add_argument('--no-pre-wake', action='store_true',
                        help="Skip the reminder five minutes before waking up.")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Enable verbose mode to see the exact API calls being made.")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = make_parser().parse_args(argv)

    log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
    level = logging.DEBUG if args.verbose else getattr(logging, log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        tz = load_timezone()
        preferences = Preferences.from_env()
        departure = build_departure(args, preferences, tz)
    except ValueError as e:
        print(f"FATAL ERROR: {e}")
        return 1

    traffic = TrafficStatus.UNKNOWN
    if departure.origin is not None and departure.destination is not None:
        try:
            adapter = make_adapter(args.api)
        except ValueError as e:
            print(f"FATAL ERROR: {e}")
            return 1
        logger.info("Requesting %s estimate from %s", departure.transport_mode.value, adapter.name)
        traffic = asyncio.run(refresh_travel_time(departure, router_from_adapter(adapter)))

    display_plan(departure, traffic)
    return 0


if __name__ == '__main__':
    sys.exit(main())
