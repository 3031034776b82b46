"""Report Repository Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence
from uuid import UUID

from waste_report.domain.entities import NewWasteReport, WasteReport


class ReportRepository(ABC):
    """폐기물 신고 저장소 포트."""

    @abstractmethod
    async def insert(self, report: NewWasteReport) -> WasteReport:
        """신고 저장.

        Returns:
            id, created_at이 할당된 WasteReport
        """
        raise NotImplementedError

    @abstractmethod
    async def get_by_id(self, report_id: UUID) -> WasteReport | None:
        """ID로 조회."""
        raise NotImplementedError

    @abstractmethod
    async def list_by_user(self, user_id: str, limit: int) -> Sequence[WasteReport]:
        """사용자의 신고 목록 (최신순)."""
        raise NotImplementedError
