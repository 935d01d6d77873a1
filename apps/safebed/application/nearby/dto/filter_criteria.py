"""Filter Criteria DTO."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_RADIUS_KM = 5.0


@dataclass(frozen=True)
class FilterCriteria:
    """주변 위치 검색 조건 DTO.

    category/gender는 문자열 그대로 비교합니다. 알 수 없는 값은
    어떤 위치와도 일치하지 않습니다.
    """

    latitude: float
    longitude: float
    radius_km: float = DEFAULT_RADIUS_KM
    category: str | None = None
    open_now: bool = False
    accessible: bool | None = None
    pets: bool | None = None
    gender: str | None = None

    @property
    def radius_meters(self) -> float:
        return self.radius_km * 1000
