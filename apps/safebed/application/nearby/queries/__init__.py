"""Application Queries."""

from safebed.application.nearby.queries.find_nearby_locations import FindNearbyLocationsQuery

__all__ = ["FindNearbyLocationsQuery"]
