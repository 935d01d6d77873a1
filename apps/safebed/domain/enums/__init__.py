"""Domain Enums."""

from safebed.domain.enums.gender_restriction import GenderRestriction
from safebed.domain.enums.location_category import LocationCategory

__all__ = ["LocationCategory", "GenderRestriction"]
