"""
Pytest fixtures shared by the alarm tests.
"""

import sys
from datetime import datetime
from pathlib import Path

import pytest

# The modules live at the repository root, not in a package.
sys.path.insert(0, str(Path(__file__).parent.parent))

from api_structures import GeoPoint


def fixed_router(seconds):
    """Builds an async router that always answers with `seconds` and records its calls."""
    calls = []

    async def route(source, destination, category):
        calls.append((source, destination, category))
        return seconds

    route.calls = calls
    return route


@pytest.fixture
def home():
    return GeoPoint(lat=33.9207, lon=-118.3280)


@pytest.fixture
def office():
    return GeoPoint(lat=33.6846, lon=-117.8265)


@pytest.fixture
def arrival():
    return datetime(2026, 3, 9, 9, 0)
