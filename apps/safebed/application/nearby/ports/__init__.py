"""Application Ports."""

from safebed.application.nearby.ports.location_store import LocationStore

__all__ = ["LocationStore"]
