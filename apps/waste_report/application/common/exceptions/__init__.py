"""Waste Report 애플리케이션 예외."""

from waste_report.application.common.exceptions.auth import UnauthorizedError
from waste_report.application.common.exceptions.base import ApplicationError
from waste_report.application.common.exceptions.infrastructure import (
    ImageStorageError,
    InfrastructureError,
    ReportPersistError,
)
from waste_report.application.common.exceptions.report import ReportNotFoundError
from waste_report.application.common.exceptions.validation import (
    BadRequestError,
    InvalidImageError,
    MissingFieldsError,
    PayloadTooLargeError,
)

__all__ = [
    "ApplicationError",
    "BadRequestError",
    "ImageStorageError",
    "InfrastructureError",
    "InvalidImageError",
    "MissingFieldsError",
    "PayloadTooLargeError",
    "ReportNotFoundError",
    "ReportPersistError",
    "UnauthorizedError",
]
