"""FindNearbyLocationsQuery 테스트."""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Any
from unittest.mock import AsyncMock

import pytest

from safebed.application.common.exceptions import LocationStoreError, MissingCoordinatesError
from safebed.application.nearby.dto import FilterCriteria
from safebed.application.nearby.queries import FindNearbyLocationsQuery
from safebed.domain.entities import Location
from safebed.domain.enums import LocationCategory

pytestmark = pytest.mark.asyncio

ORIGIN_LAT = 43.6532
ORIGIN_LNG = -79.3832


def _criteria(**overrides: Any) -> FilterCriteria:
    values: dict[str, Any] = {"latitude": ORIGIN_LAT, "longitude": ORIGIN_LNG}
    values.update(overrides)
    return FilterCriteria(**values)


@pytest.fixture
def fallback_locations() -> list[Location]:
    return [
        Location(
            id="fallback-far",
            name="Far Clinic",
            category=LocationCategory.CLINIC,
            latitude=ORIGIN_LAT + 0.02,
            longitude=ORIGIN_LNG,
        ),
        Location(
            id="fallback-near",
            name="Near Shelter",
            category=LocationCategory.SHELTER,
            latitude=ORIGIN_LAT + 0.001,
            longitude=ORIGIN_LNG,
        ),
    ]


@pytest.fixture
def query_factory(fallback_locations: list[Location], monday_noon: datetime):
    def _make(store: Any) -> FindNearbyLocationsQuery:
        return FindNearbyLocationsQuery(
            location_store=store,
            fallback_locations=fallback_locations,
            clock=lambda: monday_noon,
        )

    return _make


class TestFindNearbyLocationsQuery:
    """FindNearbyLocationsQuery 테스트."""

    async def test_store_rows_are_ranked(
        self,
        query_factory,
        mock_location_store: AsyncMock,
        shelter_row: dict[str, Any],
        food_bank_row: dict[str, Any],
    ) -> None:
        mock_location_store.nearby_locations.return_value = [shelter_row, food_bank_row]

        results = await query_factory(mock_location_store).execute(_criteria())

        assert [r.location.name for r in results] == ["Bay St Food Bank", "Queen St Shelter"]
        assert [r.meters for r in results] == [300.0, 800.0]
        mock_location_store.nearby_locations.assert_awaited_once()

    async def test_store_receives_criteria(
        self, query_factory, mock_location_store: AsyncMock
    ) -> None:
        criteria = _criteria(category="shelter", radius_km=2.5)

        await query_factory(mock_location_store).execute(criteria)

        mock_location_store.nearby_locations.assert_awaited_once_with(criteria)

    async def test_category_applied_to_store_rows(
        self,
        query_factory,
        mock_location_store: AsyncMock,
        shelter_row: dict[str, Any],
        food_bank_row: dict[str, Any],
    ) -> None:
        mock_location_store.nearby_locations.return_value = [shelter_row, food_bank_row]

        results = await query_factory(mock_location_store).execute(_criteria(category="shelter"))

        assert [r.location.name for r in results] == ["Queen St Shelter"]
        assert results[0].meters == 800.0

    async def test_store_error_serves_fallback(
        self,
        query_factory,
        mock_location_store: AsyncMock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        mock_location_store.nearby_locations.side_effect = LocationStoreError("connection refused")

        with caplog.at_level(logging.WARNING):
            results = await query_factory(mock_location_store).execute(_criteria())

        assert [r.location.id for r in results] == ["fallback-near", "fallback-far"]
        assert results[0].meters == pytest.approx(111, abs=1)
        assert "fallback" in caplog.text

    async def test_missing_store_serves_fallback(self, query_factory) -> None:
        results = await query_factory(None).execute(_criteria())

        assert [r.location.id for r in results] == ["fallback-near", "fallback-far"]

    async def test_no_payload_serves_fallback(
        self, query_factory, mock_location_store: AsyncMock
    ) -> None:
        mock_location_store.nearby_locations.return_value = None

        results = await query_factory(mock_location_store).execute(_criteria())

        assert {r.location.id for r in results} == {"fallback-near", "fallback-far"}

    async def test_empty_store_result_is_not_replaced(
        self, query_factory, mock_location_store: AsyncMock
    ) -> None:
        mock_location_store.nearby_locations.return_value = []

        results = await query_factory(mock_location_store).execute(_criteria())

        assert results == []

    async def test_fallback_respects_filters(self, query_factory) -> None:
        results = await query_factory(None).execute(_criteria(category="clinic"))

        assert [r.location.id for r in results] == ["fallback-far"]

    async def test_fallback_respects_radius(self, query_factory) -> None:
        results = await query_factory(None).execute(_criteria(radius_km=1))

        assert [r.location.id for r in results] == ["fallback-near"]

    async def test_malformed_row_is_skipped(
        self,
        query_factory,
        mock_location_store: AsyncMock,
        shelter_row: dict[str, Any],
    ) -> None:
        mock_location_store.nearby_locations.return_value = [
            {"name": "No Id", "category": "shelter"},
            shelter_row,
        ]

        results = await query_factory(mock_location_store).execute(_criteria())

        assert [r.location.name for r in results] == ["Queen St Shelter"]

    async def test_open_now_uses_clock(
        self,
        query_factory,
        mock_location_store: AsyncMock,
        shelter_row: dict[str, Any],
    ) -> None:
        closed_row = dict(shelter_row, id="closed", hours={"tue": [["00:00", "23:59"]]})
        mock_location_store.nearby_locations.return_value = [shelter_row, closed_row]

        results = await query_factory(mock_location_store).execute(_criteria(open_now=True))

        assert [r.location.id for r in results] == [shelter_row["id"]]

    @pytest.mark.parametrize(
        ("lat", "lng"),
        [(float("nan"), ORIGIN_LNG), (ORIGIN_LAT, float("inf")), (None, ORIGIN_LNG)],
    )
    async def test_invalid_coordinates_raise(
        self, query_factory, mock_location_store: AsyncMock, lat, lng
    ) -> None:
        with pytest.raises(MissingCoordinatesError):
            await query_factory(mock_location_store).execute(_criteria(latitude=lat, longitude=lng))

        mock_location_store.nearby_locations.assert_not_awaited()

    async def test_cancellation_propagates(
        self, query_factory, mock_location_store: AsyncMock
    ) -> None:
        mock_location_store.nearby_locations.side_effect = asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await query_factory(mock_location_store).execute(_criteria())

    async def test_unexpected_store_error_serves_fallback(
        self,
        query_factory,
        mock_location_store: AsyncMock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        mock_location_store.nearby_locations.side_effect = RuntimeError("driver bug")

        with caplog.at_level(logging.WARNING):
            results = await query_factory(mock_location_store).execute(_criteria())

        assert [r.location.id for r in results] == ["fallback-near", "fallback-far"]
        record = next(r for r in caplog.records if "fallback" in r.getMessage())
        assert record.levelno == logging.WARNING
        assert record.exc_info is not None
