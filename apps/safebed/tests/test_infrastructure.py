"""Infrastructure 어댑터 테스트."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
from sqlalchemy.exc import OperationalError

from safebed.application.common.exceptions import LocationStoreError
from safebed.application.nearby.dto import FilterCriteria
from safebed.infrastructure.fallback import SAMPLE_LOCATIONS
from safebed.infrastructure.integrations.supabase import SupabaseRpcClient
from safebed.infrastructure.persistence_postgres import SqlaLocationStore

pytestmark = pytest.mark.asyncio

CRITERIA = FilterCriteria(latitude=43.6532, longitude=-79.3832, radius_km=3, category="shelter")


def _client(handler) -> SupabaseRpcClient:
    return SupabaseRpcClient(
        base_url="https://project.supabase.co/",
        api_key="anon-key",
        transport=httpx.MockTransport(handler),
    )


class TestSupabaseRpcClient:
    """SupabaseRpcClient 테스트."""

    async def test_posts_rpc_params(self, shelter_row: dict[str, Any]) -> None:
        captured: dict[str, Any] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["headers"] = request.headers
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json=[shelter_row])

        client = _client(handler)
        rows = await client.nearby_locations(CRITERIA)
        await client.close()

        assert rows == [shelter_row]
        assert captured["url"] == "https://project.supabase.co/rest/v1/rpc/nearby_locations"
        assert captured["headers"]["apikey"] == "anon-key"
        assert captured["headers"]["authorization"] == "Bearer anon-key"
        assert captured["body"] == {
            "lat": 43.6532,
            "lng": -79.3832,
            "radius_km": 3,
            "cat": "shelter",
            "only_open": False,
            "need_accessible": None,
            "need_pets": None,
            "gender_focus": None,
        }

    async def test_null_payload_is_none(self) -> None:
        client = _client(lambda request: httpx.Response(200, content=b"null"))
        assert await client.nearby_locations(CRITERIA) is None

    async def test_http_error_raises(self) -> None:
        client = _client(lambda request: httpx.Response(503, text="unavailable"))
        with pytest.raises(LocationStoreError, match="503"):
            await client.nearby_locations(CRITERIA)

    async def test_error_object_raises(self) -> None:
        client = _client(
            lambda request: httpx.Response(200, json={"code": "42883", "message": "no function"})
        )
        with pytest.raises(LocationStoreError, match="no function"):
            await client.nearby_locations(CRITERIA)

    async def test_invalid_json_raises(self) -> None:
        client = _client(lambda request: httpx.Response(200, content=b"<html>"))
        with pytest.raises(LocationStoreError):
            await client.nearby_locations(CRITERIA)

    async def test_transport_error_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(LocationStoreError):
            await _client(handler).nearby_locations(CRITERIA)

    async def test_timeout_raises(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(LocationStoreError, match="timed out"):
            await _client(handler).nearby_locations(CRITERIA)

    async def test_non_object_rows_dropped(self, shelter_row: dict[str, Any]) -> None:
        client = _client(lambda request: httpx.Response(200, json=[shelter_row, 42, "x"]))
        assert await client.nearby_locations(CRITERIA) == [shelter_row]


class TestSqlaLocationStore:
    """SqlaLocationStore 테스트."""

    async def test_returns_rows_as_dicts(self, food_bank_row: dict[str, Any]) -> None:
        result = MagicMock()
        result.mappings.return_value.all.return_value = [food_bank_row]
        session = AsyncMock()
        session.execute = AsyncMock(return_value=result)

        rows = await SqlaLocationStore(session).nearby_locations(CRITERIA)

        assert rows == [food_bank_row]
        params = session.execute.await_args.args[1]
        assert params["cat"] == "shelter"
        assert params["radius_km"] == 3

    async def test_database_error_raises(self) -> None:
        session = AsyncMock()
        session.execute = AsyncMock(
            side_effect=OperationalError("SELECT 1", {}, Exception("connection refused"))
        )

        with pytest.raises(LocationStoreError):
            await SqlaLocationStore(session).nearby_locations(CRITERIA)


class TestSampleLocations:
    """Fallback 데이터셋 테스트."""

    def test_ids_unique(self) -> None:
        ids = [location.id for location in SAMPLE_LOCATIONS]
        assert len(ids) == len(set(ids))

    def test_coordinates_are_paired(self) -> None:
        for location in SAMPLE_LOCATIONS:
            assert (location.latitude is None) == (location.longitude is None)
