# Contains the adapter classes for communicating with external routing APIs.

import logging
import os
from abc import ABC, abstractmethod

import requests
from dotenv import load_dotenv

from api_structures import GeoPoint, RouteCategory, RouteInfo

logger = logging.getLogger(__name__)

# --- API Configuration ---
# Keys are read from environment variables for security.
load_dotenv()
TOMTOM_API_KEY = os.getenv("TOMTOM_API_KEY")
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")

DEFAULT_TIMEOUT_SEC = 10


class RoutingError(Exception):
    """Raised by custom routers that prefer exceptions over returning None."""


class RoutingAdapter(ABC):
    """
    Abstract Base Class (blueprint) for all routing clients.
    Every adapter answers the same question: how long does it take to get
    from one point to another for a given transport category.
    """
    name = "routing"

    def __init__(self, api_key: str | None, timeout: float = DEFAULT_TIMEOUT_SEC):
        if not api_key:
            raise ValueError(
                f"No API key configured for the {self.name} adapter.")
        self.api_key = api_key
        self.timeout = timeout

    @abstractmethod
    def get_route(self, source: GeoPoint, destination: GeoPoint, category: RouteCategory) -> RouteInfo | None:
        """Calculates a route and returns our standard RouteInfo object, or None on any failure."""

    def _get_json(self, url: str, params: dict) -> dict:
        logger.debug("[%s] GET %s params=%s", self.name, url,
                     {k: v for k, v in params.items() if k != 'key'})
        response = requests.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object from {self.name}, got {type(data).__name__}")
        return data


class TomTomAdapter(RoutingAdapter):
    """The adapter for the TomTom Routing API."""
    name = "TomTom"
    ROUTING_URL = "https://api.tomtom.com/routing/1/calculateRoute/{locations}/json"
    TRAVEL_MODES = {
        RouteCategory.DRIVING: "car",
        RouteCategory.WALKING: "pedestrian",
    }

    def __init__(self, api_key: str | None = None, timeout: float = DEFAULT_TIMEOUT_SEC):
        super().__init__(api_key or TOMTOM_API_KEY, timeout=timeout)

    def get_route(self, source: GeoPoint, destination: GeoPoint, category: RouteCategory) -> RouteInfo | None:
        locations = f"{source.as_query()}:{destination.as_query()}"
        url = self.ROUTING_URL.format(locations=locations)
        traffic = category is RouteCategory.DRIVING
        params = {
            'key': self.api_key,
            'travelMode': self.TRAVEL_MODES[category],
            'traffic': 'true' if traffic else 'false',
        }
        try:
            data = self._get_json(url, params)
            travel_seconds = data['routes'][0]['summary']['travelTimeInSeconds']
            # With 'traffic' on, TomTom's travelTimeInSeconds includes traffic delay.
            return RouteInfo(travel_time_sec=float(travel_seconds), traffic_data_included=traffic)
        except requests.exceptions.RequestException as e:
            logger.warning("[TomTom] A network error occurred for route %s -> %s: %s",
                           source.as_query(), destination.as_query(), e)
            return None
        except (KeyError, IndexError, TypeError, ValueError):
            logger.warning("[TomTom] Could not find a valid %s route %s -> %s.",
                           category.value, source.as_query(), destination.as_query())
            return None


class GoogleMapsAdapter(RoutingAdapter):
    """The adapter for the Google Maps Directions API."""
    name = "Google"
    DIRECTIONS_URL = "https://maps.googleapis.com/maps/api/directions/json"

    def __init__(self, api_key: str | None = None, timeout: float = DEFAULT_TIMEOUT_SEC):
        super().__init__(api_key or GOOGLE_API_KEY, timeout=timeout)

    def get_route(self, source: GeoPoint, destination: GeoPoint, category: RouteCategory) -> RouteInfo | None:
        params = {
            'origin': source.as_query(),
            'destination': destination.as_query(),
            'mode': category.value,
            'alternatives': 'false',
            'key': self.api_key,
        }
        if category is RouteCategory.DRIVING:
            # duration_in_traffic is only returned when a departure time is given.
            params['departure_time'] = 'now'
        try:
            data = self._get_json(self.DIRECTIONS_URL, params)
            if data.get('status') != 'OK' or not data.get('routes'):
                logger.warning("[Google] Could not find a valid %s route %s -> %s. Status: %s",
                               category.value, source.as_query(), destination.as_query(), data.get('status'))
                return None
            leg = data['routes'][0]['legs'][0]
            # Use duration_in_traffic if available, otherwise fall back to duration.
            if 'duration_in_traffic' in leg:
                return RouteInfo(travel_time_sec=float(leg['duration_in_traffic']['value']),
                                 traffic_data_included=True)
            return RouteInfo(travel_time_sec=float(leg['duration']['value']), traffic_data_included=False)
        except requests.exceptions.RequestException as e:
            logger.warning("[Google] A network error occurred for route %s -> %s: %s",
                           source.as_query(), destination.as_query(), e)
            return None
        except (KeyError, IndexError, TypeError, ValueError):
            logger.warning("[Google] Could not parse the %s route %s -> %s.",
                           category.value, source.as_query(), destination.as_query())
            return None


ADAPTERS = {
    'google': GoogleMapsAdapter,
    'tomtom': TomTomAdapter,
}


def make_adapter(api: str) -> RoutingAdapter:
    """Builds the adapter registered under `api`; raises ValueError for unknown names or missing keys."""
    try:
        adapter_cls = ADAPTERS[api.lower()]
    except KeyError:
        raise ValueError(f"Unknown routing API: {api!r}. Choose one of: {', '.join(ADAPTERS)}") from None
    return adapter_cls()
