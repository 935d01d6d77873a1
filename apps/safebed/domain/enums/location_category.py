"""Location Category Enum."""

from __future__ import annotations

from enum import Enum


class LocationCategory(str, Enum):
    """서비스 위치 카테고리."""

    SHELTER = "shelter"
    WARMING_COOLING = "warming_cooling"
    FOOD_BANK = "food_bank"
    DROP_IN = "drop_in"
    WASHROOM = "washroom"
    HARM_REDUCTION = "harm_reduction"
    OUTREACH = "outreach"
    CLINIC = "clinic"
    OTHER = "other"
