"""SafeBed Domain Layer."""

from safebed.domain.entities import Location
from safebed.domain.enums import GenderRestriction, LocationCategory
from safebed.domain.value_objects import DAY_KEYS, HoursSchedule

__all__ = ["Location", "LocationCategory", "GenderRestriction", "HoursSchedule", "DAY_KEYS"]
