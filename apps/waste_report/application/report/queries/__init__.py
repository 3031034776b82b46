"""Report Queries."""

from waste_report.application.report.queries.get_report import GetReportQuery
from waste_report.application.report.queries.get_waste_types import (
    GetWasteTypesQuery,
    WasteTypeGuide,
)
from waste_report.application.report.queries.list_user_reports import ListUserReportsQuery

__all__ = [
    "GetReportQuery",
    "GetWasteTypesQuery",
    "ListUserReportsQuery",
    "WasteTypeGuide",
]
