"""Hours Evaluator Service.

주간 운영시간 스케줄로 현재 영업 여부를 판단합니다.
Port 의존성이 없는 순수 로직입니다.

스케줄 형식::

    {"mon": [["09:00", "17:00"]], "fri": [["22:00", "02:00"]], "sun": []}

- 빈 목록은 그날 휴무입니다.
- end < start 인 구간은 자정을 넘어 다음 날까지 이어집니다.
- 스케줄이 없거나 해석할 수 없으면 "영업 중 확인 불가"로 보고 False를 반환합니다.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import datetime
from typing import Any, Mapping

from safebed.domain.value_objects import DAY_KEYS


class HoursEvaluator:
    """운영시간 평가 서비스."""

    MINUTES_IN_DAY = 24 * 60
    LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

    @classmethod
    def is_open_now(
        cls,
        schedule: Mapping[str, Any] | None,
        now: datetime,
    ) -> bool:
        """now 시점에 스케줄상 영업 중인지 반환합니다.

        Args:
            schedule: 요일 키 → (start, end) 구간 목록
            now: 평가 시점 (호출자의 타임존 기준 현지 시각)

        Returns:
            해당 요일의 구간 중 하나라도 현재 분을 포함하면 True
        """
        if not schedule or not isinstance(schedule, Mapping):
            return False

        day_key = cls.day_key(now)
        intervals = schedule.get(day_key)
        if (
            not isinstance(intervals, Sequence)
            or isinstance(intervals, (str, bytes))
            or not intervals
        ):
            return False

        current = now.hour * 60 + now.minute
        for interval in intervals:
            bounds = cls._parse_interval(interval)
            if bounds is None:
                continue
            start, end = bounds
            if cls._interval_contains(start, end, current):
                return True
        return False

    @staticmethod
    def day_key(moment: datetime) -> str:
        """일요일=0 기준 요일 키 (sun, mon, ...)."""
        return DAY_KEYS[moment.isoweekday() % 7]

    @classmethod
    def to_minutes(cls, value: Any) -> int | None:
        """HH:MM 문자열을 자정 기준 분으로 변환합니다.

        시 부분의 선행 정수만 사용하고, 분 부분이 없으면 0으로 봅니다.
        시 부분이 숫자가 아니거나 분 부분이 숫자가 아니면 None입니다.
        """
        if not isinstance(value, str):
            return None
        hour_part, separator, minute_part = value.partition(":")
        hours = cls._leading_int(hour_part)
        if hours is None:
            return None
        if not separator:
            return hours * 60
        minutes = cls._leading_int(minute_part)
        if minutes is None:
            return None
        return hours * 60 + minutes

    @classmethod
    def normalize(cls, minute_mark: int) -> int:
        """[0, 1440) 범위로 감쌉니다."""
        return minute_mark % cls.MINUTES_IN_DAY

    @classmethod
    def _parse_interval(cls, interval: Any) -> tuple[int, int] | None:
        if isinstance(interval, (str, bytes)) or not isinstance(interval, (list, tuple)):
            return None
        if len(interval) != 2:
            return None
        start = cls.to_minutes(interval[0])
        end = cls.to_minutes(interval[1])
        if start is None or end is None:
            return None
        return cls.normalize(start), cls.normalize(end)

    @staticmethod
    def _interval_contains(start: int, end: int, current: int) -> bool:
        if start <= end:
            return start <= current < end
        # overnight
        return current >= start or current < end

    @classmethod
    def _leading_int(cls, value: str) -> int | None:
        match = cls.LEADING_INT.match(value)
        if match is None:
            return None
        return int(match.group(1))
