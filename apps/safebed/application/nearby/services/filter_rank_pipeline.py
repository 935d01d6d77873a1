"""Filter & Rank Pipeline Service.

후보 위치에 거리 채우기 → 조건 필터 → 거리순 정렬 → 최대 개수 자르기를 적용합니다.
저장소가 같은 조건을 서버 측에서 먼저 적용하더라도, 최종 포함 여부와 순서는
이 파이프라인이 결정합니다.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Iterable

from safebed.application.nearby.dto import FilterCriteria, LocationEntryDTO
from safebed.application.nearby.services.distance_calculator import DistanceCalculator
from safebed.application.nearby.services.hours_evaluator import HoursEvaluator


class FilterRankPipeline:
    """필터/정렬 파이프라인."""

    MAX_RESULTS = 50

    @classmethod
    def apply(
        cls,
        entries: Iterable[LocationEntryDTO],
        criteria: FilterCriteria,
        now: datetime,
    ) -> list[LocationEntryDTO]:
        """조건에 맞는 위치를 거리 오름차순으로 최대 MAX_RESULTS개 반환합니다.

        Args:
            entries: 후보 위치 (meters가 있으면 그대로 신뢰)
            criteria: 검색 조건
            now: open_now 평가 시점 (설정된 타임존 기준)

        Returns:
            거리순 정렬된 위치 목록. 거리를 알 수 없는 위치는 마지막
        """
        filled = [cls._fill_distance(entry, criteria) for entry in entries]
        retained = [entry for entry in filled if cls.matches(entry, criteria, now)]
        retained.sort(key=cls._sort_key)
        return retained[: cls.MAX_RESULTS]

    @classmethod
    def matches(
        cls,
        entry: LocationEntryDTO,
        criteria: FilterCriteria,
        now: datetime,
    ) -> bool:
        location = entry.location

        if criteria.category and location.category != criteria.category:
            return False
        if criteria.accessible is not None and location.accessible != criteria.accessible:
            return False
        if criteria.pets is not None and location.pets_allowed != criteria.pets:
            return False
        if (
            criteria.gender
            and location.gender_restriction is not None
            and location.gender_restriction != criteria.gender
        ):
            return False
        if criteria.open_now and not HoursEvaluator.is_open_now(location.hours, now):
            return False
        if (
            entry.meters is not None
            and math.isfinite(entry.meters)
            and entry.meters > criteria.radius_meters
        ):
            return False
        return True

    @staticmethod
    def _fill_distance(entry: LocationEntryDTO, criteria: FilterCriteria) -> LocationEntryDTO:
        if entry.meters is not None:
            return entry
        return DistanceCalculator.attach_distance(
            entry.location, criteria.latitude, criteria.longitude
        )

    @staticmethod
    def _sort_key(entry: LocationEntryDTO) -> float:
        if entry.meters is None or not math.isfinite(entry.meters):
            return math.inf
        return entry.meters
