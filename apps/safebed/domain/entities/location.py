"""Location Entity."""

from __future__ import annotations

from dataclasses import dataclass

from safebed.domain.enums import GenderRestriction, LocationCategory
from safebed.domain.value_objects import HoursSchedule


@dataclass(frozen=True)
class Location:
    """서비스 제공 위치 엔티티 (쉼터, 푸드뱅크, 클리닉 등).

    위치 데이터는 외부 저장소가 소유하며, 이 서비스는 요청마다 읽고
    정규화한 뒤 버립니다. 요청 기준 거리는 엔티티가 아니라
    ``LocationEntryDTO``에 담깁니다.

    Tri-state 플래그(accessible, pets_allowed, lgbtq_friendly)에서
    None은 "알 수 없음"이며 False와 다릅니다.
    """

    id: str
    name: str
    category: LocationCategory
    phone: str | None = None
    website: str | None = None
    address: str | None = None
    notes: str | None = None
    capacity: int | None = None
    beds_available: int | None = None
    hours: HoursSchedule | None = None
    accessible: bool | None = None
    pets_allowed: bool | None = None
    gender_restriction: GenderRestriction | None = None
    lgbtq_friendly: bool | None = None
    updated_at: str | None = None
    last_verified_at: str | None = None
    source: str | None = None
    latitude: float | None = None
    longitude: float | None = None

    def has_coordinates(self) -> bool:
        """위도/경도가 모두 있으면 True."""
        return self.latitude is not None and self.longitude is not None
