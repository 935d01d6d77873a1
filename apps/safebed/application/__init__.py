"""SafeBed Application Layer."""

from safebed.application.nearby import (
    FilterCriteria,
    FindNearbyLocationsQuery,
    LocationEntryDTO,
    LocationStore,
)

__all__ = [
    "FilterCriteria",
    "LocationEntryDTO",
    "LocationStore",
    "FindNearbyLocationsQuery",
]
