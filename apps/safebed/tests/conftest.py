"""Test fixtures for safebed tests."""

from __future__ import annotations

from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock

import pytest

from safebed.domain.entities import Location
from safebed.domain.enums import GenderRestriction, LocationCategory

# 2026-10-19는 월요일
MONDAY_NOON = datetime(2026, 10, 19, 12, 0)

TORONTO_LAT = 43.6532
TORONTO_LNG = -79.3832


@pytest.fixture
def monday_noon() -> datetime:
    return MONDAY_NOON


@pytest.fixture
def mock_location_store() -> AsyncMock:
    """LocationStore mock."""
    store = AsyncMock()
    store.nearby_locations = AsyncMock(return_value=[])
    return store


@pytest.fixture
def sample_location() -> Location:
    """테스트용 Location."""
    return Location(
        id="loc-1",
        name="Downtown Shelter",
        category=LocationCategory.SHELTER,
        phone="416-555-0000",
        address="1 Test St, Toronto, ON",
        capacity=50,
        beds_available=0,
        hours={"mon": [["09:00", "17:00"]]},
        accessible=True,
        pets_allowed=False,
        gender_restriction=GenderRestriction.ALL,
        lgbtq_friendly=True,
        source="test",
        latitude=43.6505,
        longitude=-79.3885,
    )


@pytest.fixture
def shelter_row() -> dict[str, Any]:
    """저장소가 돌려주는 쉼터 행 (800m)."""
    return {
        "id": "8d0f6c1e-0000-4000-8000-000000000001",
        "name": "Queen St Shelter",
        "category": "shelter",
        "phone": "416-555-0001",
        "website": None,
        "address": "1 Queen St W",
        "notes": None,
        "meters": 800.0,
        "capacity": 40,
        "beds_available": 3,
        "hours": {"mon": [["00:00", "23:59"]]},
        "accessible": True,
        "pets_allowed": None,
        "gender_restriction": "all",
        "lgbtq_friendly": True,
        "updated_at": "2026-10-01T12:00:00+00:00",
        "last_verified_at": None,
        "source": "city",
        "latitude": 43.6560,
        "longitude": -79.3920,
    }


@pytest.fixture
def food_bank_row() -> dict[str, Any]:
    """저장소가 돌려주는 푸드뱅크 행 (300m)."""
    return {
        "id": "8d0f6c1e-0000-4000-8000-000000000002",
        "name": "Bay St Food Bank",
        "category": "food_bank",
        "meters": 300.0,
        "hours": None,
        "lat": 43.6550,
        "lng": -79.3850,
    }
