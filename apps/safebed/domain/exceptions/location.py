"""Location 도메인 예외."""

from safebed.domain.exceptions.base import DomainError


class InvalidLocationRowError(DomainError):
    """저장소 행을 Location으로 변환할 수 없음."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Location row is missing required field '{field}'")
