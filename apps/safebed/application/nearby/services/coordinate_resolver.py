"""Coordinate Resolver Service.

저장소 응답 행의 여러 좌표 표현을 (위도, 경도) 하나로 정규화합니다.

우선순위 (먼저 일치하는 것 사용):
    1. latitude / longitude 숫자 필드
    2. lat / lng 숫자 필드
    3. geom 객체의 coordinates [lng, lat] (GeoJSON 순서)
    4. geom 문자열 (3과 같은 구조의 JSON). 파싱 실패는 무시
    5. 모두 실패하면 (None, None)
"""

from __future__ import annotations

import json
import math
from numbers import Real
from typing import Any, Mapping

Coordinates = tuple[float | None, float | None]


class CoordinateResolver:
    """좌표 정규화 서비스."""

    FIELD_PAIRS = (("latitude", "longitude"), ("lat", "lng"))
    GEOMETRY_FIELD = "geom"

    @classmethod
    def extract_coordinates(cls, row: Mapping[str, Any]) -> Coordinates:
        for lat_key, lng_key in cls.FIELD_PAIRS:
            latitude = row.get(lat_key)
            longitude = row.get(lng_key)
            if cls._is_number(latitude) and cls._is_number(longitude):
                return float(latitude), float(longitude)

        geom = row.get(cls.GEOMETRY_FIELD)
        if isinstance(geom, Mapping):
            resolved = cls._from_geometry(geom)
            if resolved is not None:
                return resolved
        elif isinstance(geom, (str, bytes)):
            try:
                parsed = json.loads(geom)
            except ValueError:
                parsed = None
            if isinstance(parsed, Mapping):
                resolved = cls._from_geometry(parsed)
                if resolved is not None:
                    return resolved

        return None, None

    @classmethod
    def _from_geometry(cls, geometry: Mapping[str, Any]) -> tuple[float, float] | None:
        coordinates = geometry.get("coordinates")
        if not isinstance(coordinates, (list, tuple)) or len(coordinates) < 2:
            return None
        longitude, latitude = coordinates[0], coordinates[1]
        if not (cls._is_number(latitude) and cls._is_number(longitude)):
            return None
        return float(latitude), float(longitude)

    @staticmethod
    def _is_number(value: Any) -> bool:
        if isinstance(value, bool) or not isinstance(value, Real):
            return False
        try:
            return math.isfinite(value)
        except OverflowError:
            # float 범위를 넘는 정수
            return False
