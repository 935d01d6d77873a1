"""Domain Entities."""

from safebed.domain.entities.location import Location

__all__ = ["Location"]
