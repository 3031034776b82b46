"""Waste Report 도메인 예외."""

from waste_report.domain.exceptions.base import DomainError
from waste_report.domain.exceptions.report import (
    DisposalGuideIncompleteError,
    InvalidCoordinatesError,
)

__all__ = [
    "DomainError",
    "DisposalGuideIncompleteError",
    "InvalidCoordinatesError",
]
