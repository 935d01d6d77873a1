"""SafeBed Locations API - FastAPI application entry point.

분산 트레이싱 통합 (otel_enabled):
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (Supabase RPC 호출)
- SQLAlchemy 자동 계측 (nearby_locations 쿼리)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from safebed.infrastructure.observability import (
    instrument_fastapi,
    instrument_httpx,
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)
from safebed.presentation.http.controllers import health_router, location_router
from safebed.presentation.http.errors import register_exception_handlers
from safebed.setup.config import get_settings
from safebed.setup.database import dispose_engine, get_engine
from safebed.setup.dependencies import close_supabase_client
from safebed.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 라이프사이클 관리."""
    setup_logging()
    logger.info(f"Starting {settings.service_name} ({settings.environment})")

    if not (settings.supabase_url and settings.supabase_key) and not settings.database_url:
        logger.warning("No geospatial store configured, every request will use the fallback dataset")

    # OpenTelemetry 설정
    if settings.otel_enabled:
        setup_tracing(
            service_name=settings.service_name,
            service_version=settings.service_version,
            environment=settings.environment,
            endpoint=settings.otel_exporter_otlp_endpoint,
            sampling_rate=settings.otel_sampling_rate,
        )
        instrument_httpx()
        engine = get_engine()
        if engine is not None:
            instrument_sqlalchemy(engine)

    yield

    logger.info(f"Shutting down {settings.service_name}")
    await close_supabase_client()
    await dispose_engine()
    if settings.otel_enabled:
        shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title="SafeBed Locations API",
        description="Nearby shelters, food banks, clinics and other social-service locations",
        version=settings.service_version,
        docs_url="/locations/docs",
        openapi_url="/locations/openapi.json",
        redoc_url="/locations/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    if settings.otel_enabled:
        instrument_fastapi(app)

    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)  # /health, /ping
    app.include_router(location_router)  # /locations

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "safebed.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.environment == "development",
    )
