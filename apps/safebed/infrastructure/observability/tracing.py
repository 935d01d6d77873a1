"""OpenTelemetry Tracing - SafeBed Locations API.

otel_enabled 설정이 켜져 있을 때만 호출됩니다.
OpenTelemetry 패키지는 ``tracing`` extra로 설치합니다.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)

_tracer_provider: Any = None


def setup_tracing(
    service_name: str,
    service_version: str,
    environment: str,
    endpoint: str,
    sampling_rate: float = 1.0,
) -> bool:
    """OpenTelemetry 트레이싱 설정.

    Returns:
        설정 성공 여부
    """
    global _tracer_provider  # noqa: PLW0603

    try:
        from opentelemetry import trace
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import (
            OTLPSpanExporter,
        )
        from opentelemetry.sdk.resources import Resource
        from opentelemetry.sdk.trace import TracerProvider
        from opentelemetry.sdk.trace.export import BatchSpanProcessor
        from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
    except ImportError as e:
        logger.warning(f"OpenTelemetry not available: {e}")
        return False

    resource = Resource.create(
        {
            "service.name": service_name,
            "service.version": service_version,
            "deployment.environment": environment,
        }
    )
    provider = TracerProvider(resource=resource, sampler=TraceIdRatioBased(sampling_rate))
    provider.add_span_processor(
        BatchSpanProcessor(
            OTLPSpanExporter(endpoint=endpoint, insecure=True),
            max_queue_size=2048,
            max_export_batch_size=512,
            schedule_delay_millis=1000,
        )
    )
    trace.set_tracer_provider(provider)
    _tracer_provider = provider

    logger.info(
        "OpenTelemetry tracing configured",
        extra={"service": service_name, "endpoint": endpoint, "sampling_rate": sampling_rate},
    )
    return True


def instrument_fastapi(app) -> None:
    """FastAPI 자동 계측."""
    try:
        from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
    except ImportError:
        logger.warning("FastAPIInstrumentor not available")
        return

    FastAPIInstrumentor.instrument_app(app, excluded_urls="health,ping")
    logger.info("FastAPI instrumentation enabled")


def instrument_httpx() -> None:
    """HTTPX 자동 계측 (Supabase RPC 호출)."""
    try:
        from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
    except ImportError:
        logger.warning("HTTPXClientInstrumentor not available")
        return

    HTTPXClientInstrumentor().instrument()
    logger.info("HTTPX instrumentation enabled")


def instrument_sqlalchemy(engine) -> None:
    """SQLAlchemy 자동 계측 (nearby_locations 쿼리)."""
    try:
        from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
    except ImportError:
        logger.warning("SQLAlchemyInstrumentor not available")
        return

    SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)
    logger.info("SQLAlchemy instrumentation enabled")


def shutdown_tracing() -> None:
    """트레이싱 종료 (남은 span flush)."""
    global _tracer_provider  # noqa: PLW0603
    if _tracer_provider is not None:
        _tracer_provider.shutdown()
        _tracer_provider = None
