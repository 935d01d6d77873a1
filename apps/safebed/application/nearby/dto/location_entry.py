"""Location Entry DTO."""

from __future__ import annotations

from dataclasses import dataclass

from safebed.domain.entities import Location


@dataclass(frozen=True)
class LocationEntryDTO:
    """위치 + 요청 기준 거리(미터).

    meters는 요청 단위로만 존재하며 저장되지 않습니다.
    None은 "계산 불가"를 뜻합니다 (0이나 무한대가 아님).
    """

    location: Location
    meters: float | None = None
