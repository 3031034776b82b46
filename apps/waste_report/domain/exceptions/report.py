"""Waste Report 도메인 예외."""

from __future__ import annotations

from typing import Iterable

from waste_report.domain.exceptions.base import DomainError


class InvalidCoordinatesError(DomainError):
    """위도/경도 범위 위반."""

    code = "INVALID_COORDINATES"

    def __init__(self, latitude: float, longitude: float) -> None:
        self.latitude = latitude
        self.longitude = longitude
        super().__init__("Invalid GPS coordinates")


class DisposalGuideIncompleteError(DomainError):
    """배출 안내 테이블에 누락된 폐기물 종류가 있음."""

    code = "DISPOSAL_GUIDE_INCOMPLETE"

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(f"Disposal guide is missing entries for: {', '.join(self.missing)}")
