"""Notification Status Enum."""

from enum import Enum


class NotificationStatus(str, Enum):
    """불법투기 알림 처리 결과."""

    SENT = "sent"
    NOT_SENT = "not_sent"
    FAILED = "failed"
