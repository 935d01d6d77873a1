"""HTTP Controllers."""

from safebed.presentation.http.controllers.health import router as health_router
from safebed.presentation.http.controllers.location import router as location_router

__all__ = ["health_router", "location_router"]
