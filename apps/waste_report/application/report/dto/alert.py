"""Illegal Dumping Alert DTO."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True)
class IllegalDumpingAlert:
    """불법투기 감지 알림 이벤트."""

    report_id: str
    location: str
    user_id: str
    type: str = "illegal_dumping"
    title: str = "Illegal Dumping Detected"
    priority: str = "high"
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def message(self) -> str:
        return f"New illegal dumping report at {self.location}"

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (이벤트 payload)."""
        return {
            "type": self.type,
            "title": self.title,
            "message": self.message,
            "report_id": self.report_id,
            "location": self.location,
            "user_id": self.user_id,
            "priority": self.priority,
            "occurred_at": self.occurred_at.isoformat(),
        }
