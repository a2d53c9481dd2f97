# Travel-time estimation on top of a routing capability.

import asyncio
import logging
from typing import Awaitable, Callable

from api_adapters import RoutingAdapter, RoutingError
from api_structures import GeoPoint, RouteCategory, TransportMode

logger = logging.getLogger(__name__)

# Returns the base travel time in seconds, or None when no route is available.
Router = Callable[[GeoPoint, GeoPoint, RouteCategory], Awaitable[float | None]]


async def estimate_travel_time(
    source: GeoPoint,
    destination: GeoPoint,
    mode: TransportMode,
    router: Router,
) -> float | None:
    """
    Estimates travel time in seconds for `mode`, or None when no estimate is available.

    The router is asked for the mode's routing category and its answer is scaled
    by the mode's speed multiplier. Callers cannot tell a missing route from an
    unreachable service; both come back as None.
    """
    try:
        base = await router(source, destination, mode.route_category)
    except RoutingError as e:
        logger.warning("Routing failed for %s -> %s (%s): %s",
                       source.as_query(), destination.as_query(), mode.value, e)
        return None
    if base is None:
        return None
    return base * mode.speed_multiplier


def router_from_adapter(adapter: RoutingAdapter) -> Router:
    """Wraps a blocking adapter so each route request runs in a worker thread."""
    async def route(source: GeoPoint, destination: GeoPoint, category: RouteCategory) -> float | None:
        route_info = await asyncio.to_thread(adapter.get_route, source, destination, category)
        if route_info is None:
            return None
        return route_info.travel_time_sec

    return route
