"""Location Row Mapper Service.

저장소 응답 행(dict, RowMapping 등)을 Location 엔티티로 변환합니다.
"""

from __future__ import annotations

import json
import math
from datetime import date, datetime
from numbers import Real
from typing import Any, Mapping

from safebed.application.nearby.dto import LocationEntryDTO
from safebed.application.nearby.services.coordinate_resolver import CoordinateResolver
from safebed.domain.entities import Location
from safebed.domain.enums import GenderRestriction, LocationCategory
from safebed.domain.exceptions import InvalidLocationRowError


class LocationRowMapper:
    """저장소 행 → Location 변환 서비스."""

    @classmethod
    def to_entry(cls, row: Mapping[str, Any]) -> LocationEntryDTO:
        """행을 변환하고 저장소가 계산한 거리(meters)를 함께 담습니다."""
        return LocationEntryDTO(location=cls.to_domain(row), meters=cls._meters(row.get("meters")))

    @classmethod
    def to_domain(cls, row: Mapping[str, Any]) -> Location:
        """행을 Location으로 변환합니다.

        Raises:
            InvalidLocationRowError: id 또는 name이 없을 때
        """
        raw_id = row.get("id")
        if raw_id is None or raw_id == "":
            raise InvalidLocationRowError("id")
        name = row.get("name")
        if not isinstance(name, str) or not name:
            raise InvalidLocationRowError("name")

        latitude, longitude = CoordinateResolver.extract_coordinates(row)

        return Location(
            id=str(raw_id),
            name=name,
            category=cls._category(row.get("category")),
            phone=cls._text(row.get("phone")),
            website=cls._text(row.get("website")),
            address=cls._text(row.get("address")),
            notes=cls._text(row.get("notes")),
            capacity=cls._int(row.get("capacity")),
            beds_available=cls._int(row.get("beds_available")),
            hours=cls._hours(row.get("hours")),
            accessible=cls._flag(row.get("accessible")),
            pets_allowed=cls._flag(row.get("pets_allowed")),
            gender_restriction=cls._gender(row.get("gender_restriction")),
            lgbtq_friendly=cls._flag(row.get("lgbtq_friendly")),
            updated_at=cls._timestamp(row.get("updated_at")),
            last_verified_at=cls._timestamp(row.get("last_verified_at")),
            source=cls._text(row.get("source")),
            latitude=latitude,
            longitude=longitude,
        )

    @staticmethod
    def _category(value: Any) -> LocationCategory:
        try:
            return LocationCategory(value)
        except ValueError:
            return LocationCategory.OTHER

    @staticmethod
    def _gender(value: Any) -> GenderRestriction | None:
        if value is None:
            return None
        try:
            return GenderRestriction(value)
        except ValueError:
            return None

    @staticmethod
    def _text(value: Any) -> str | None:
        if value is None:
            return None
        return str(value)

    @staticmethod
    def _int(value: Any) -> int | None:
        # 0은 유효한 값이며 None(알 수 없음)과 구분됩니다.
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        return value

    @staticmethod
    def _flag(value: Any) -> bool | None:
        if isinstance(value, bool):
            return value
        return None

    @staticmethod
    def _timestamp(value: Any) -> str | None:
        if isinstance(value, (datetime, date)):
            return value.isoformat()
        if isinstance(value, str) and value:
            return value
        return None

    @staticmethod
    def _hours(value: Any) -> dict[str, Any] | None:
        # jsonb 컬럼은 드라이버에 따라 문자열로 올 수 있음
        if isinstance(value, (str, bytes)):
            try:
                value = json.loads(value)
            except ValueError:
                return None
        if isinstance(value, Mapping):
            return dict(value)
        return None

    @staticmethod
    def _meters(value: Any) -> float | None:
        if isinstance(value, bool) or not isinstance(value, Real):
            return None
        try:
            meters = float(value)
        except OverflowError:
            return None
        if not math.isfinite(meters) or meters < 0:
            return None
        return meters
