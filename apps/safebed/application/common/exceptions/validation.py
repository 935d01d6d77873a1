"""검증 관련 예외."""

from safebed.application.common.exceptions.base import ApplicationError


class MissingCoordinatesError(ApplicationError):
    """lat/lng 쿼리 파라미터 누락 또는 파싱 실패."""

    def __init__(self) -> None:
        super().__init__("Query parameters 'lat' and 'lng' are required.")
