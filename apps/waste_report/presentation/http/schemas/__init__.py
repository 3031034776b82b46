"""HTTP Schemas."""

from waste_report.presentation.http.schemas.waste_report import (
    SubmitReportBody,
    SubmitReportResponseSchema,
    WasteReportSchema,
    WasteReportListSchema,
    WasteTypeSchema,
)

__all__ = [
    "SubmitReportBody",
    "SubmitReportResponseSchema",
    "WasteReportListSchema",
    "WasteReportSchema",
    "WasteTypeSchema",
]
