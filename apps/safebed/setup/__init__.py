"""Setup Module."""

from safebed.setup.config import Settings, get_settings
from safebed.setup.database import get_engine, get_session_factory
from safebed.setup.dependencies import (
    get_find_nearby_locations_query,
    get_location_store,
)

__all__ = [
    "Settings",
    "get_settings",
    "get_engine",
    "get_session_factory",
    "get_find_nearby_locations_query",
    "get_location_store",
]
