"""Redis 클라이언트 팩토리 (알림 Streams 전용)."""

from __future__ import annotations

import logging

import redis.asyncio as aioredis

from waste_report.setup.config import get_settings

logger = logging.getLogger(__name__)

_streams_client: "aioredis.Redis | None" = None


def get_streams_client() -> "aioredis.Redis":
    """비동기 Redis Streams 클라이언트 (싱글톤).

    연결은 첫 명령 실행 시점에 맺어집니다.
    """
    global _streams_client
    if _streams_client is None:
        settings = get_settings()
        _streams_client = aioredis.from_url(
            settings.redis_streams_url,
            decode_responses=True,
            socket_timeout=5.0,
            socket_connect_timeout=5.0,
            retry_on_timeout=True,
            health_check_interval=30,
        )
        logger.info("redis_streams_client_created")
    return _streams_client


async def close_streams_client() -> None:
    """클라이언트 종료 (lifespan shutdown)."""
    global _streams_client
    if _streams_client is not None:
        await _streams_client.aclose()
        _streams_client = None
        logger.info("redis_streams_client_closed")
