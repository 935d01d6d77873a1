"""Bundled fallback dataset."""

from safebed.infrastructure.fallback.sample_locations import SAMPLE_LOCATIONS

__all__ = ["SAMPLE_LOCATIONS"]
