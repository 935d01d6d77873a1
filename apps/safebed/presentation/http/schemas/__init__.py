"""HTTP Schemas."""

from safebed.presentation.http.schemas.location import (
    ErrorResponse,
    LocationEntry,
    LocationListResponse,
)

__all__ = ["ErrorResponse", "LocationEntry", "LocationListResponse"]
