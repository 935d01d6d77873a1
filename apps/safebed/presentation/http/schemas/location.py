"""Location HTTP Schemas."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from safebed.domain.enums import GenderRestriction, LocationCategory


class LocationEntry(BaseModel):
    """위치 정보 응답 스키마."""

    id: str
    name: str
    category: LocationCategory
    phone: str | None = None
    website: str | None = None
    address: str | None = None
    notes: str | None = None
    meters: float | None = None
    capacity: int | None = None
    beds_available: int | None = None
    hours: dict[str, Any] | None = None
    accessible: bool | None = None
    pets_allowed: bool | None = None
    gender_restriction: GenderRestriction | None = None
    lgbtq_friendly: bool | None = None
    updated_at: str | None = None
    last_verified_at: str | None = None
    source: str | None = None
    latitude: float | None = None
    longitude: float | None = None


class LocationListResponse(BaseModel):
    """주변 위치 목록 응답 스키마."""

    results: list[LocationEntry]


class ErrorResponse(BaseModel):
    """오류 응답 스키마."""

    error: str
    code: str
