"""Weekly opening hours types."""

from __future__ import annotations

from typing import Mapping, Sequence

# Sunday first, matching the index of ``DAY_KEYS[(weekday + 1) % 7]``.
DAY_KEYS: tuple[str, ...] = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

HoursInterval = Sequence[str]
HoursSchedule = Mapping[str, Sequence[HoursInterval]]
