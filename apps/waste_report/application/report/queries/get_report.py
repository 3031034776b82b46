"""Get Report Query - 신고 단건 조회."""

from __future__ import annotations

from uuid import UUID

from waste_report.application.common.exceptions import ReportNotFoundError
from waste_report.application.report.ports import ReportRepository
from waste_report.domain.entities import WasteReport


class GetReportQuery:
    """본인 신고 단건 조회.

    다른 사용자의 신고는 존재 여부를 노출하지 않도록 404로 처리합니다.
    """

    def __init__(self, report_repository: ReportRepository):
        self._report_repository = report_repository

    async def execute(self, user_id: str, report_id: str) -> WasteReport:
        try:
            report_uuid = UUID(report_id)
        except ValueError as e:
            raise ReportNotFoundError(report_id) from e

        report = await self._report_repository.get_by_id(report_uuid)
        if report is None or not report.is_owned_by(user_id):
            raise ReportNotFoundError(report_id)
        return report
