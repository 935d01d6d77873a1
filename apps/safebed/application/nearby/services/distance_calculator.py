"""Distance Calculator Service."""

from __future__ import annotations

import math

from safebed.application.nearby.dto import LocationEntryDTO
from safebed.domain.entities import Location


class DistanceCalculator:
    """Haversine 대권 거리 계산."""

    EARTH_RADIUS_KM = 6371.0

    @classmethod
    def distance_km(
        cls,
        origin_lat: float,
        origin_lng: float,
        target_lat: float,
        target_lng: float,
    ) -> float:
        """두 좌표 사이의 거리를 km로 반환합니다."""
        d_lat = math.radians(target_lat - origin_lat)
        d_lng = math.radians(target_lng - origin_lng)

        a = math.sin(d_lat / 2) ** 2 + math.cos(math.radians(origin_lat)) * math.cos(
            math.radians(target_lat)
        ) * math.sin(d_lng / 2) ** 2
        a = min(1.0, max(0.0, a))

        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
        return cls.EARTH_RADIUS_KM * c

    @classmethod
    def attach_distance(
        cls,
        location: Location,
        origin_lat: float,
        origin_lng: float,
    ) -> LocationEntryDTO:
        """위치에 기준점으로부터의 거리(미터, 정수 반올림)를 붙입니다.

        좌표가 없으면 meters는 None입니다.
        """
        if not location.has_coordinates():
            return LocationEntryDTO(location=location, meters=None)

        km = cls.distance_km(origin_lat, origin_lng, location.latitude, location.longitude)
        return LocationEntryDTO(location=location, meters=round(km * 1000))
