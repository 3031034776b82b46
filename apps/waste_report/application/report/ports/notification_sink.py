"""Notification Sink Port."""

from __future__ import annotations

from abc import ABC, abstractmethod

from waste_report.application.report.dto import IllegalDumpingAlert


class NotificationSink(ABC):
    """알림 발행 포트."""

    @abstractmethod
    async def emit(self, alert: IllegalDumpingAlert) -> None:
        """불법투기 알림 발행."""
        raise NotImplementedError
