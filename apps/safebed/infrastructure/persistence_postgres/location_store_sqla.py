"""SQLAlchemy Location Store Implementation."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from safebed.application.common.exceptions import LocationStoreError
from safebed.application.nearby.dto import FilterCriteria
from safebed.application.nearby.ports import LocationStore

logger = logging.getLogger(__name__)

NEARBY_LOCATIONS_SQL = text(
    """
    SELECT *
    FROM public.nearby_locations(
        lat => :lat,
        lng => :lng,
        radius_km => :radius_km,
        cat => CAST(:cat AS public.location_category),
        only_open => :only_open,
        need_accessible => :need_accessible,
        need_pets => :need_pets,
        gender_focus => CAST(:gender_focus AS public.gender_restriction)
    )
    """
)


class SqlaLocationStore(LocationStore):
    """SQLAlchemy 기반 위치 저장소.

    LocationStore Port를 구현합니다.
    PostGIS ST_DWithin / ST_Distance를 사용하는 nearby_locations 함수를 호출합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    async def nearby_locations(
        self, criteria: FilterCriteria
    ) -> Sequence[Mapping[str, Any]] | None:
        """nearby_locations 함수를 실행합니다."""
        try:
            result = await self._session.execute(NEARBY_LOCATIONS_SQL, self.rpc_params(criteria))
            rows = result.mappings().all()
        except (SQLAlchemyError, OSError) as exc:
            logger.debug("nearby_locations query failed", exc_info=True)
            raise LocationStoreError(f"nearby_locations query failed: {exc}") from exc
        return [dict(row) for row in rows]
