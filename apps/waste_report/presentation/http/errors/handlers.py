"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
응답 body는 `{"error", "code"}`이며 500은 `message`를 추가합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from waste_report.application.common.exceptions import ApplicationError, InfrastructureError
from waste_report.domain.exceptions import DomainError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(InfrastructureError)
    async def infrastructure_error_handler(request: Request, exc: InfrastructureError):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.message,
                "message": exc.detail or exc.message,
                "code": exc.code,
            },
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.message, "code": exc.code},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"error": exc.message, "code": exc.code},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.info("request_validation_failed", extra={"path": request.url.path})
        return JSONResponse(
            status_code=400,
            content={"error": "Invalid request body", "code": "INVALID_REQUEST"},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("unhandled_error", extra={"path": request.url.path})
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal server error",
                "message": str(exc) or type(exc).__name__,
                "code": "INTERNAL_ERROR",
            },
        )
