"""Nearby Location Application Layer."""

from safebed.application.nearby.dto import FilterCriteria, LocationEntryDTO
from safebed.application.nearby.ports import LocationStore
from safebed.application.nearby.queries import FindNearbyLocationsQuery
from safebed.application.nearby.services import (
    CoordinateResolver,
    DistanceCalculator,
    FilterRankPipeline,
    HoursEvaluator,
    LocationRowMapper,
)

__all__ = [
    "FilterCriteria",
    "LocationEntryDTO",
    "LocationStore",
    "FindNearbyLocationsQuery",
    "CoordinateResolver",
    "DistanceCalculator",
    "FilterRankPipeline",
    "HoursEvaluator",
    "LocationRowMapper",
]
