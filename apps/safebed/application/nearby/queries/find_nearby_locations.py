"""Find Nearby Locations Query.

주변 서비스 위치를 조회하는 Query(지휘자)입니다.
Port를 통해 저장소와 통신하고, Service에 순수 로직을 위임합니다.
저장소를 쓸 수 없으면 번들된 fallback 데이터셋으로 응답합니다 (재시도 없음).
"""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable, Mapping, Sequence

from safebed.application.common.exceptions import LocationStoreError, MissingCoordinatesError
from safebed.application.nearby.dto import FilterCriteria, LocationEntryDTO
from safebed.application.nearby.services import FilterRankPipeline, LocationRowMapper
from safebed.domain.exceptions import InvalidLocationRowError

if TYPE_CHECKING:
    from safebed.application.nearby.ports import LocationStore
    from safebed.domain.entities import Location

logger = logging.getLogger(__name__)

SOURCE_STORE = "store"
SOURCE_FALLBACK = "fallback"


class FindNearbyLocationsQuery:
    """주변 위치 조회 Query.

    Workflow:
        1. 기준 좌표 검증
        2. 저장소 반경 검색 (Port), 실패 시 fallback 데이터셋
        3. 행 정규화 (Service)
        4. 필터/정렬/자르기 (Service)
    """

    def __init__(
        self,
        location_store: "LocationStore | None",
        fallback_locations: "Sequence[Location]",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize.

        Args:
            location_store: 저장소 Port. None이면 설정되지 않은 것으로 보고 fallback 사용
            fallback_locations: 저장소를 쓸 수 없을 때 사용할 위치 목록
            clock: open_now 평가 시각 제공자
        """
        self._store = location_store
        self._fallback = fallback_locations
        self._clock = clock or datetime.now

    async def execute(self, criteria: FilterCriteria) -> list[LocationEntryDTO]:
        """주변 위치를 조회합니다.

        Raises:
            MissingCoordinatesError: 기준 좌표가 없거나 유한한 수가 아닐 때
        """
        self._validate(criteria)

        logger.info(
            "Nearby location search started",
            extra={
                "lat": criteria.latitude,
                "lng": criteria.longitude,
                "radius_km": criteria.radius_km,
                "category": criteria.category,
                "open_now": criteria.open_now,
            },
        )

        entries, source = await self._load_candidates(criteria)
        results = FilterRankPipeline.apply(entries, criteria, now=self._clock())

        logger.info(
            "Nearby location search completed",
            extra={"results_count": len(results), "candidates_count": len(entries), "source": source},
        )
        return results

    async def _load_candidates(
        self, criteria: FilterCriteria
    ) -> tuple[list[LocationEntryDTO], str]:
        if self._store is None:
            logger.warning("Location store not configured, serving fallback dataset")
            return self._fallback_entries(), SOURCE_FALLBACK

        try:
            rows = await self._store.nearby_locations(criteria)
        except LocationStoreError as exc:
            logger.warning(
                "Location store query failed, serving fallback dataset",
                extra={"error": exc.message},
            )
            return self._fallback_entries(), SOURCE_FALLBACK
        except Exception:
            # CancelledError는 BaseException이라 그대로 전파됨
            logger.warning(
                "Location store query raised unexpectedly, serving fallback dataset",
                exc_info=True,
            )
            return self._fallback_entries(), SOURCE_FALLBACK

        if rows is None:
            logger.warning("Location store returned no data, serving fallback dataset")
            return self._fallback_entries(), SOURCE_FALLBACK

        return self._map_rows(rows), SOURCE_STORE

    def _fallback_entries(self) -> list[LocationEntryDTO]:
        # 거리를 비워 파이프라인이 원시 좌표로 계산하게 함
        return [LocationEntryDTO(location=location, meters=None) for location in self._fallback]

    @staticmethod
    def _map_rows(rows: Sequence[Mapping[str, Any]]) -> list[LocationEntryDTO]:
        entries: list[LocationEntryDTO] = []
        for row in rows:
            try:
                entries.append(LocationRowMapper.to_entry(row))
            except InvalidLocationRowError as exc:
                logger.warning("Skipping malformed location row", extra={"field": exc.field})
        return entries

    @staticmethod
    def _validate(criteria: FilterCriteria) -> None:
        for value in (criteria.latitude, criteria.longitude):
            if value is None or not math.isfinite(value):
                raise MissingCoordinatesError()
