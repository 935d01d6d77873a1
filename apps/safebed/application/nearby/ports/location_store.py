"""Location Store Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Sequence

from safebed.application.nearby.dto import FilterCriteria


class LocationStore(ABC):
    """외부 지리공간 저장소 포트.

    Infrastructure Layer에서 구현합니다. 저장소는 인덱스 기반 반경 검색과
    카테고리/접근성/반려동물/성별 조건을 서버 측에서 먼저 적용하고,
    각 행에 meters(기준점으로부터의 거리)를 계산해 돌려줍니다.
    """

    RPC_NAME = "nearby_locations"

    @abstractmethod
    async def nearby_locations(
        self, criteria: FilterCriteria
    ) -> Sequence[Mapping[str, Any]] | None:
        """반경 검색을 수행합니다.

        Args:
            criteria: 검색 조건

        Returns:
            저장소 원시 행 목록. 저장소가 데이터를 돌려주지 않으면 None

        Raises:
            LocationStoreError: 전송 실패, 저장소 오류, 잘못된 응답
        """
        ...

    @staticmethod
    def rpc_params(criteria: FilterCriteria) -> dict[str, Any]:
        """nearby_locations 함수 인자."""
        return {
            "lat": criteria.latitude,
            "lng": criteria.longitude,
            "radius_km": criteria.radius_km,
            "cat": criteria.category,
            "only_open": criteria.open_now,
            "need_accessible": criteria.accessible,
            "need_pets": criteria.pets,
            "gender_focus": criteria.gender,
        }
