"""List User Reports Query."""

from __future__ import annotations

from typing import Sequence

from waste_report.application.report.ports import ReportRepository
from waste_report.domain.entities import WasteReport

DEFAULT_LIMIT = 20
MAX_LIMIT = 100


class ListUserReportsQuery:
    """사용자의 신고 목록 조회 (최신순)."""

    def __init__(self, report_repository: ReportRepository):
        self._report_repository = report_repository

    async def execute(self, user_id: str, limit: int = DEFAULT_LIMIT) -> Sequence[WasteReport]:
        limit = max(1, min(limit, MAX_LIMIT))
        return await self._report_repository.list_by_user(user_id, limit)
