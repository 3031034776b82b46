"""Waste Report API Main Application.

시민이 촬영한 폐기물 사진과 GPS 좌표로 신고를 접수합니다.
분류 → 불법투기 구역 검사 → 저장 → EcoPoints 적립 → 알림.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from waste_report.infrastructure.messaging import close_streams_client
from waste_report.presentation.http.controllers import (
    health_router,
    legacy_router,
    waste_report_router,
)
from waste_report.presentation.http.errors import register_exception_handlers
from waste_report.setup.config import get_settings
from waste_report.setup.database import dispose_engine
from waste_report.setup.logging import configure_logging
from waste_report.setup.tracing import configure_tracing, instrument_fastapi, shutdown_tracing

logger = logging.getLogger(__name__)
settings = get_settings()

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]
CORS_ALLOW_METHODS = ["POST", "GET", "OPTIONS"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    configure_logging(
        service_name=settings.service_name,
        service_version=settings.service_version,
        environment=settings.environment,
        log_level=settings.log_level,
        json_format=settings.log_format == "json",
    )
    configure_tracing(settings)
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")

    yield

    logger.info(f"Shutting down {settings.service_name}")
    await close_streams_client()
    await dispose_engine()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 생성."""
    app = FastAPI(
        title="Waste Report API",
        description="Waste photo classification and illegal dumping reports",
        version=settings.service_version,
        docs_url="/api/v1/waste-reports/docs",
        redoc_url="/api/v1/waste-reports/redoc",
        openapi_url="/api/v1/waste-reports/openapi.json",
        lifespan=lifespan,
    )

    # 와일드카드 origin은 credentials와 함께 쓸 수 없음
    origins = settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    register_exception_handlers(app)
    instrument_fastapi(app, settings)

    app.include_router(health_router)
    app.include_router(waste_report_router, prefix="/api/v1")
    app.include_router(legacy_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
