"""Dependency Injection for FastAPI."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Annotated, AsyncIterator, Callable, Sequence
from zoneinfo import ZoneInfo

from fastapi import Depends

from safebed.application.nearby import FindNearbyLocationsQuery
from safebed.application.nearby.ports import LocationStore
from safebed.domain.entities import Location
from safebed.infrastructure.fallback import SAMPLE_LOCATIONS
from safebed.infrastructure.integrations.supabase import SupabaseRpcClient
from safebed.infrastructure.persistence_postgres import SqlaLocationStore
from safebed.setup.config import get_settings
from safebed.setup.database import get_session_factory

logger = logging.getLogger(__name__)

_supabase_client: SupabaseRpcClient | None = None


def get_supabase_client() -> SupabaseRpcClient | None:
    """Supabase RPC Client 싱글톤을 반환합니다."""
    global _supabase_client  # noqa: PLW0603
    if _supabase_client is None:
        settings = get_settings()
        if settings.supabase_url and settings.supabase_key:
            _supabase_client = SupabaseRpcClient(
                base_url=settings.supabase_url,
                api_key=settings.supabase_key,
                timeout=settings.store_timeout_seconds,
            )
            logger.info("Supabase RPC client created")
    return _supabase_client


async def close_supabase_client() -> None:
    """Supabase RPC Client를 정리합니다."""
    global _supabase_client  # noqa: PLW0603
    if _supabase_client is not None:
        await _supabase_client.close()
        _supabase_client = None


async def get_location_store() -> AsyncIterator[LocationStore | None]:
    """Location Store를 주입합니다.

    Supabase 설정이 있으면 RPC 클라이언트, 없으면 DB 세션 기반 저장소,
    둘 다 없으면 None (fallback 데이터셋 사용).
    """
    supabase = get_supabase_client()
    if supabase is not None:
        yield supabase
        return

    session_factory = get_session_factory()
    if session_factory is None:
        yield None
        return

    async with session_factory() as session:
        yield SqlaLocationStore(session)


def get_fallback_locations() -> Sequence[Location]:
    """Fallback 데이터셋을 주입합니다."""
    return SAMPLE_LOCATIONS


def get_clock() -> Callable[[], datetime]:
    """open_now 평가용 시계 (설정된 타임존 기준)."""
    tz = ZoneInfo(get_settings().timezone)
    return lambda: datetime.now(tz)


async def get_find_nearby_locations_query(
    store: Annotated[LocationStore | None, Depends(get_location_store)],
    fallback: Annotated[Sequence[Location], Depends(get_fallback_locations)],
    clock: Annotated[Callable[[], datetime], Depends(get_clock)],
) -> FindNearbyLocationsQuery:
    """FindNearbyLocationsQuery를 주입합니다."""
    return FindNearbyLocationsQuery(location_store=store, fallback_locations=fallback, clock=clock)
