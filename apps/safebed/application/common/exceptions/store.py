"""위치 저장소 관련 예외."""

from safebed.application.common.exceptions.base import ApplicationError


class LocationStoreError(ApplicationError):
    """외부 위치 저장소 호출 실패.

    전송 오류, 저장소가 보고한 오류, 형식이 잘못된 응답을 모두 포함합니다.
    Query는 이 예외를 받으면 fallback 데이터셋으로 전환합니다.
    """

    def __init__(self, message: str = "Location store unavailable") -> None:
        super().__init__(message)
