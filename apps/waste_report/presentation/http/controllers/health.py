"""Health Check Controller."""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from waste_report.infrastructure.messaging import get_streams_client
from waste_report.setup.config import get_settings
from waste_report.setup.database import get_engine

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)


@router.get("/health")
async def health() -> dict:
    """서비스 헬스 체크."""
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.service_name,
        "version": settings.service_version,
    }


@router.get("/ready")
async def ready() -> JSONResponse:
    """서비스 준비 상태 체크 (PostgreSQL, Redis)."""
    checks: dict[str, str] = {}

    try:
        async with get_engine().connect() as conn:
            await conn.execute(text("SELECT 1"))
        checks["postgres"] = "ok"
    except Exception as e:
        logger.warning("readiness_check_failed", extra={"dependency": "postgres", "error": str(e)})
        checks["postgres"] = "error"

    try:
        await get_streams_client().ping()
        checks["redis"] = "ok"
    except Exception as e:
        logger.warning("readiness_check_failed", extra={"dependency": "redis", "error": str(e)})
        checks["redis"] = "error"

    is_ready = all(value == "ok" for value in checks.values())
    return JSONResponse(
        status_code=200 if is_ready else 503,
        content={"status": "ready" if is_ready else "not_ready", "checks": checks},
    )
