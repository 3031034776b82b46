"""Redis Streams 알림 발행.

불법투기 알림을 지자체 알림 스트림에 XADD 합니다.
스트림 소비(푸시/SMS 전송)는 별도 컨슈머가 담당합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from waste_report.application.report.dto import IllegalDumpingAlert
from waste_report.application.report.ports import NotificationSink

if TYPE_CHECKING:
    import redis.asyncio as aioredis

logger = logging.getLogger(__name__)

DEFAULT_STREAM_KEY = "waste_report:alerts"
DEFAULT_STREAM_MAXLEN = 10000


class RedisStreamsNotificationSink(NotificationSink):
    """Redis Streams 기반 NotificationSink."""

    def __init__(
        self,
        redis_client: "aioredis.Redis",
        stream_key: str = DEFAULT_STREAM_KEY,
        maxlen: int = DEFAULT_STREAM_MAXLEN,
    ) -> None:
        self._redis = redis_client
        self._stream_key = stream_key
        self._maxlen = maxlen

    async def emit(self, alert: IllegalDumpingAlert) -> None:
        fields = {key: str(value) for key, value in alert.to_dict().items()}
        msg_id = await self._redis.xadd(
            self._stream_key,
            fields,
            maxlen=self._maxlen,
            approximate=True,
        )
        logger.info(
            "illegal_dumping_alert_published",
            extra={
                "stream": self._stream_key,
                "msg_id": msg_id,
                "report_id": alert.report_id,
            },
        )
