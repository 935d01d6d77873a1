"""Observability - OpenTelemetry Tracing."""

from safebed.infrastructure.observability.tracing import (
    instrument_fastapi,
    instrument_httpx,
    instrument_sqlalchemy,
    setup_tracing,
    shutdown_tracing,
)

__all__ = [
    "setup_tracing",
    "instrument_fastapi",
    "instrument_httpx",
    "instrument_sqlalchemy",
    "shutdown_tracing",
]
