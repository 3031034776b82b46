"""Coordinates Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from waste_report.domain.exceptions.report import InvalidCoordinatesError

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


@dataclass(frozen=True, slots=True)
class Coordinates:
    """GPS 좌표 Value Object.

    Attributes:
        latitude: 위도 (-90 ~ 90)
        longitude: 경도 (-180 ~ 180)

    Raises:
        InvalidCoordinatesError: 범위를 벗어난 경우
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        if not self.is_valid(self.latitude, self.longitude):
            raise InvalidCoordinatesError(self.latitude, self.longitude)

    @staticmethod
    def is_valid(latitude: float, longitude: float) -> bool:
        """좌표 범위 검증."""
        return (
            LATITUDE_RANGE[0] <= latitude <= LATITUDE_RANGE[1]
            and LONGITUDE_RANGE[0] <= longitude <= LONGITUDE_RANGE[1]
        )

    def as_location_string(self) -> str:
        """`"<lat>,<lon>"` 형식 문자열 (정수 좌표는 소수점 생략)."""
        return f"{_format_degree(self.latitude)},{_format_degree(self.longitude)}"


def _format_degree(value: float) -> str:
    value = float(value)
    if value.is_integer():
        return str(int(value))
    # 지수 표기 없이 (1e-05 -> 0.00001)
    return format(Decimal(repr(value)), "f")
