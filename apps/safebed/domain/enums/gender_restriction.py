"""Gender Restriction Enum."""

from __future__ import annotations

from enum import Enum


class GenderRestriction(str, Enum):
    """이용 대상 성별/그룹 제한.

    값이 없는 경우(None)는 "미지정"이며 ALL과 같지 않습니다.
    """

    WOMEN = "women"
    MEN = "men"
    ALL = "all"
    YOUTH = "youth"
    FAMILY = "family"
