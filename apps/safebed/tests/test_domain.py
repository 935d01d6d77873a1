"""Domain Layer 단위 테스트."""

from __future__ import annotations

import dataclasses

import pytest

from safebed.domain.entities import Location
from safebed.domain.enums import GenderRestriction, LocationCategory
from safebed.domain.exceptions import DomainError, InvalidLocationRowError
from safebed.domain.value_objects import DAY_KEYS


class TestLocation:
    """Location Entity 테스트."""

    def test_has_coordinates(self, sample_location: Location) -> None:
        assert sample_location.has_coordinates() is True

    def test_missing_longitude(self, sample_location: Location) -> None:
        location = dataclasses.replace(sample_location, longitude=None)
        assert location.has_coordinates() is False

    def test_is_immutable(self, sample_location: Location) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            sample_location.name = "changed"  # type: ignore[misc]

    def test_optional_fields_default_to_unknown(self) -> None:
        """Tri-state 플래그와 수용 인원은 기본이 None (0/False 아님)."""
        location = Location(id="x", name="X", category=LocationCategory.OTHER)
        assert location.accessible is None
        assert location.pets_allowed is None
        assert location.lgbtq_friendly is None
        assert location.gender_restriction is None
        assert location.beds_available is None
        assert location.capacity is None


class TestEnums:
    """Domain Enum 테스트."""

    def test_categories(self) -> None:
        assert {c.value for c in LocationCategory} == {
            "shelter",
            "warming_cooling",
            "food_bank",
            "drop_in",
            "washroom",
            "harm_reduction",
            "outreach",
            "clinic",
            "other",
        }

    def test_gender_restrictions(self) -> None:
        assert {g.value for g in GenderRestriction} == {"women", "men", "all", "youth", "family"}

    def test_category_compares_to_plain_string(self) -> None:
        assert LocationCategory.SHELTER == "shelter"

    def test_day_keys_are_sunday_first(self) -> None:
        assert DAY_KEYS == ("sun", "mon", "tue", "wed", "thu", "fri", "sat")


class TestExceptions:
    """도메인 예외 테스트."""

    def test_invalid_row_error(self) -> None:
        error = InvalidLocationRowError("id")
        assert isinstance(error, DomainError)
        assert error.field == "id"
        assert "'id'" in error.message
