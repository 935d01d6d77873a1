"""Domain Value Objects."""

from safebed.domain.value_objects.hours import DAY_KEYS, HoursInterval, HoursSchedule

__all__ = ["DAY_KEYS", "HoursInterval", "HoursSchedule"]
