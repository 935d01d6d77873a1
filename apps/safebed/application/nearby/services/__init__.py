"""Application Services."""

from safebed.application.nearby.services.coordinate_resolver import CoordinateResolver
from safebed.application.nearby.services.distance_calculator import DistanceCalculator
from safebed.application.nearby.services.filter_rank_pipeline import FilterRankPipeline
from safebed.application.nearby.services.hours_evaluator import HoursEvaluator
from safebed.application.nearby.services.location_row_mapper import LocationRowMapper

__all__ = [
    "CoordinateResolver",
    "DistanceCalculator",
    "FilterRankPipeline",
    "HoursEvaluator",
    "LocationRowMapper",
]
