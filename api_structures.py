# Defines the standardized, internal data structures for the application.

from dataclasses import dataclass
from enum import Enum
from typing import assert_never


@dataclass(frozen=True)
class GeoPoint:
    """A standardized representation of geographic coordinates."""
    lat: float
    lon: float

    @classmethod
    def parse(cls, text: str) -> "GeoPoint":
        """Builds a GeoPoint from 'lat,lon' text, e.g. '34.05,-118.24'."""
        parts = text.split(",")
        if len(parts) != 2:
            raise ValueError(f"Expected 'lat,lon' but got: {text!r}")
        try:
            return cls(lat=float(parts[0]), lon=float(parts[1]))
        except ValueError:
            raise ValueError(f"Coordinates must be numbers: {text!r}") from None

    def as_query(self) -> str:
        return f"{self.lat},{self.lon}"


@dataclass
class RouteInfo:
    """A standardized representation of a route's travel time."""
    travel_time_sec: float
    traffic_data_included: bool


class RouteCategory(Enum):
    """Transport categories understood by the routing services."""
    DRIVING = "driving"
    WALKING = "walking"


class TransportMode(Enum):
    DRIVE = "drive"
    BIKE = "bike"
    WALK = "walk"

    @property
    def speed_multiplier(self) -> float:
        match self:
            case TransportMode.DRIVE:
                return 1.0
            case TransportMode.BIKE:
                return 0.33
            case TransportMode.WALK:
                return 1.0
            case _:
                assert_never(self)

    @property
    def route_category(self) -> RouteCategory:
        # No routing service here has a cycling category; bikes are
        # estimated from the walking route.
        match self:
            case TransportMode.DRIVE:
                return RouteCategory.DRIVING
            case TransportMode.BIKE:
                return RouteCategory.WALKING
            case TransportMode.WALK:
                return RouteCategory.WALKING
            case _:
                assert_never(self)

    @property
    def verb(self) -> str:
        match self:
            case TransportMode.DRIVE:
                return "driving"
            case TransportMode.BIKE:
                return "biking"
            case TransportMode.WALK:
                return "walking"
            case _:
                assert_never(self)

    @classmethod
    def parse(cls, value: str) -> "TransportMode":
        """Accepts mode values as well as the stored names used by older alarms."""
        key = value.strip().lower()
        aliases = {
            "automobile": cls.DRIVE,
            "driving": cls.DRIVE,
            "cycling": cls.BIKE,
            "walking": cls.WALK,
        }
        if key in aliases:
            return aliases[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown transport mode: {value!r}") from None


class TrafficStatus(Enum):
    CLEAR = "clear"
    MODERATE = "moderate"
    HEAVY = "heavy"
    UNKNOWN = "unknown"
