"""Messaging Infrastructure."""

from waste_report.infrastructure.messaging.redis_client import (
    close_streams_client,
    get_streams_client,
)
from waste_report.infrastructure.messaging.redis_streams_notifier import (
    RedisStreamsNotificationSink,
)

__all__ = [
    "RedisStreamsNotificationSink",
    "close_streams_client",
    "get_streams_client",
]
