"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from safebed.application.common.exceptions import ApplicationError, MissingCoordinatesError
from safebed.domain.exceptions import DomainError


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(MissingCoordinatesError)
    async def missing_coordinates_handler(request: Request, exc: MissingCoordinatesError):
        return JSONResponse(
            status_code=400,
            content={"error": exc.message, "code": "MISSING_COORDINATES"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"error": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"error": exc.message, "code": "APPLICATION_ERROR"},
        )
