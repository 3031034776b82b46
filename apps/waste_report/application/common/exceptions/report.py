"""신고 조회 관련 애플리케이션 예외."""

from waste_report.application.common.exceptions.base import ApplicationError


class ReportNotFoundError(ApplicationError):
    """신고를 찾을 수 없음."""

    code = "REPORT_NOT_FOUND"
    status_code = 404

    def __init__(self, report_id: str | None = None) -> None:
        message = f"Waste report not found: {report_id}" if report_id else "Waste report not found"
        super().__init__(message)
