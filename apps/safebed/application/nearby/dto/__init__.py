"""Application DTOs."""

from safebed.application.nearby.dto.filter_criteria import DEFAULT_RADIUS_KM, FilterCriteria
from safebed.application.nearby.dto.location_entry import LocationEntryDTO

__all__ = ["DEFAULT_RADIUS_KM", "FilterCriteria", "LocationEntryDTO"]
