"""Report Commands."""

from waste_report.application.report.commands.submit_report import (
    SubmitReportCommand,
    SubmitReportRequest,
    SubmitReportResponse,
)

__all__ = ["SubmitReportCommand", "SubmitReportRequest", "SubmitReportResponse"]
