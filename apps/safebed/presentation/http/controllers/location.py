"""Location Controller."""

from __future__ import annotations

import math
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from safebed.application.common.exceptions import MissingCoordinatesError
from safebed.application.nearby import FilterCriteria, FindNearbyLocationsQuery, LocationEntryDTO
from safebed.presentation.http.schemas import ErrorResponse, LocationEntry, LocationListResponse
from safebed.setup.config import get_settings
from safebed.setup.dependencies import get_find_nearby_locations_query

router = APIRouter(prefix="/locations", tags=["locations"])

TRUE_VALUES = frozenset({"true", "1", "yes", "y"})
FALSE_VALUES = frozenset({"false", "0", "no", "n"})


@router.get(
    "",
    response_model=LocationListResponse,
    responses={400: {"model": ErrorResponse}},
    summary="Find nearby service locations",
)
async def nearby_locations(
    query: Annotated[FindNearbyLocationsQuery, Depends(get_find_nearby_locations_query)],
    lat: str | None = Query(None, description="기준 위도 (필수)"),
    lng: str | None = Query(None, description="기준 경도 (필수)"),
    radius_km: str | None = Query(None, description="검색 반경 km (기본 5)"),
    category: str | None = Query(None, description="LocationCategory 값"),
    open_now: str | None = Query(None, description="true/1/yes/y 또는 false/0/no/n"),
    accessible: str | None = Query(None, description="true/1/yes/y 또는 false/0/no/n"),
    pets: str | None = Query(None, description="true/1/yes/y 또는 false/0/no/n"),
    gender: str | None = Query(None, description="GenderRestriction 값"),
) -> LocationListResponse:
    """주변 서비스 위치를 거리순으로 조회합니다."""
    latitude = _parse_number(lat)
    longitude = _parse_number(lng)
    if latitude is None or longitude is None:
        raise MissingCoordinatesError()

    radius = _parse_number(radius_km)
    criteria = FilterCriteria(
        latitude=latitude,
        longitude=longitude,
        radius_km=radius if radius is not None else get_settings().default_radius_km,
        category=category or None,
        open_now=_parse_bool_param(open_now) or False,
        accessible=_parse_bool_param(accessible),
        pets=_parse_bool_param(pets),
        gender=gender or None,
    )

    entries = await query.execute(criteria)
    return LocationListResponse(results=[_to_schema(e) for e in entries])


def _to_schema(entry: LocationEntryDTO) -> LocationEntry:
    location = entry.location
    return LocationEntry(
        id=location.id,
        name=location.name,
        category=location.category,
        phone=location.phone,
        website=location.website,
        address=location.address,
        notes=location.notes,
        meters=entry.meters,
        capacity=location.capacity,
        beds_available=location.beds_available,
        hours=dict(location.hours) if location.hours is not None else None,
        accessible=location.accessible,
        pets_allowed=location.pets_allowed,
        gender_restriction=location.gender_restriction,
        lgbtq_friendly=location.lgbtq_friendly,
        updated_at=location.updated_at,
        last_verified_at=location.last_verified_at,
        source=location.source,
        latitude=location.latitude,
        longitude=location.longitude,
    )


def _parse_number(raw: str | None) -> float | None:
    """실수 파라미터를 파싱합니다. 실패하거나 유한한 수가 아니면 None."""
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _parse_bool_param(raw: str | None) -> bool | None:
    """불리언 유사 파라미터를 파싱합니다. 인식할 수 없는 값은 None."""
    if raw is None:
        return None
    normalized = raw.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    return None
