# Alarm models: user preferences and a single departure with its alarm times.

import logging
import math
import os
from dataclasses import dataclass, field
from datetime import datetime

from dotenv import load_dotenv

from api_structures import GeoPoint, TrafficStatus, TransportMode
from time_calculator import departure_time, subtract_duration, wake_up_time
from travel_estimator import Router, estimate_travel_time

logger = logging.getLogger(__name__)

PRE_WAKE_LEAD_SEC = 5 * 60


def _minutes_from_env(name: str, default_sec: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default_sec
    try:
        minutes = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of minutes, got {raw!r}") from None
    if not math.isfinite(minutes):
        raise ValueError(f"{name} must be a finite number of minutes, got {raw!r}")
    if minutes < 0:
        raise ValueError(f"{name} must not be negative, got {raw!r}")
    return minutes * 60


@dataclass
class Preferences:
    """Defaults applied to new departures. Durations are in seconds."""
    default_prep_time: float = 1800
    default_travel_time: float = 1200
    traffic_buffer: float = 600
    default_transport_mode: TransportMode = TransportMode.DRIVE

    @classmethod
    def from_env(cls) -> "Preferences":
        load_dotenv()
        defaults = cls()
        mode_name = os.getenv("ONTIME_TRANSPORT_MODE")
        try:
            mode = TransportMode.parse(mode_name) if mode_name else defaults.default_transport_mode
        except ValueError as e:
            raise ValueError(f"ONTIME_TRANSPORT_MODE: {e}") from None
        return cls(
            default_prep_time=_minutes_from_env("ONTIME_PREP_MINUTES", defaults.default_prep_time),
            default_travel_time=_minutes_from_env("ONTIME_TRAVEL_MINUTES", defaults.default_travel_time),
            traffic_buffer=_minutes_from_env("ONTIME_TRAFFIC_BUFFER_MINUTES", defaults.traffic_buffer),
            default_transport_mode=mode,
        )


@dataclass
class Departure:
    """
    A trip the user has to be on time for.

    The alarm times are derived from the target arrival time: wake up early enough
    to prepare and travel, leave early enough to travel. A live travel estimate,
    when present, takes precedence over the static travel time.
    """
    label: str
    target_arrival_time: datetime
    prep_duration: float = 1800
    static_travel_time: float = 1200
    transport_mode: TransportMode = TransportMode.DRIVE
    origin: GeoPoint | None = None
    destination: GeoPoint | None = None
    live_travel_time: float | None = None
    has_pre_wake_alarm: bool = True
    is_enabled: bool = True
    sound_id: str = "default"
    repeat_days: list[int] = field(default_factory=list)  # 0 = Sunday ... 6 = Saturday

    def __post_init__(self):
        for day in self.repeat_days:
            if not 0 <= day <= 6:
                raise ValueError(f"Repeat day must be between 0 (Sunday) and 6 (Saturday), got {day}")

    @classmethod
    def from_preferences(cls, label: str, arrival: datetime, preferences: Preferences, **kwargs) -> "Departure":
        kwargs.setdefault("prep_duration", preferences.default_prep_time)
        kwargs.setdefault("static_travel_time", preferences.default_travel_time)
        kwargs.setdefault("transport_mode", preferences.default_transport_mode)
        return cls(label=label, target_arrival_time=arrival, **kwargs)

    @property
    def effective_travel_time(self) -> float:
        if self.live_travel_time is not None:
            return self.live_travel_time
        return self.static_travel_time

    @property
    def wake_up_time(self) -> datetime:
        return wake_up_time(self.target_arrival_time, self.prep_duration, self.effective_travel_time)

    @property
    def departure_time(self) -> datetime:
        return departure_time(self.target_arrival_time, self.effective_travel_time)

    @property
    def pre_wake_time(self) -> datetime | None:
        if not self.has_pre_wake_alarm:
            return None
        return subtract_duration(self.wake_up_time, PRE_WAKE_LEAD_SEC)

    @property
    def total_alarm_count(self) -> int:
        return 3 if self.has_pre_wake_alarm else 2

    @property
    def scheduled_alarm_times(self) -> list[datetime]:
        times = []
        if self.pre_wake_time is not None:
            times.append(self.pre_wake_time)
        times.append(self.wake_up_time)
        times.append(self.departure_time)
        return times


def classify_traffic(live_travel_time: float | None, static_travel_time: float) -> TrafficStatus:
    """Compares a live estimate against the usual travel time."""
    if live_travel_time is None or static_travel_time <= 0:
        return TrafficStatus.UNKNOWN
    ratio = live_travel_time / static_travel_time
    if ratio < 1.1:
        return TrafficStatus.CLEAR
    if ratio < 1.3:
        return TrafficStatus.MODERATE
    return TrafficStatus.HEAVY


async def refresh_travel_time(departure: Departure, router: Router) -> TrafficStatus:
    """Updates the departure's live travel time and reports how traffic compares to usual."""
    if departure.origin is None or departure.destination is None:
        return TrafficStatus.UNKNOWN

    estimate = await estimate_travel_time(
        departure.origin, departure.destination, departure.transport_mode, router)
    if estimate is None:
        logger.info("No live travel estimate for '%s'; keeping %s",
                    departure.label, departure.effective_travel_time)
        return TrafficStatus.UNKNOWN

    departure.live_travel_time = estimate
    return classify_traffic(estimate, departure.static_travel_time)
