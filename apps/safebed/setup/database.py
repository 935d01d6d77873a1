"""Database Setup.

SAFEBED_DATABASE_URL이 없으면 엔진을 만들지 않습니다 (fallback 전용 모드).
"""

from __future__ import annotations

from functools import lru_cache

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from safebed.setup.config import get_settings


@lru_cache
def get_engine() -> AsyncEngine | None:
    """SQLAlchemy 엔진 싱글톤. DB 미설정 시 None."""
    settings = get_settings()
    if not settings.database_url:
        return None
    return create_async_engine(
        settings.database_url,
        echo=False,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
    )


@lru_cache
def get_session_factory() -> async_sessionmaker[AsyncSession] | None:
    """세션 팩토리 싱글톤. DB 미설정 시 None."""
    engine = get_engine()
    if engine is None:
        return None
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def dispose_engine() -> None:
    """엔진 커넥션 풀을 정리합니다."""
    if get_engine.cache_info().currsize == 0:
        return
    engine = get_engine()
    if engine is not None:
        await engine.dispose()
    get_session_factory.cache_clear()
    get_engine.cache_clear()
