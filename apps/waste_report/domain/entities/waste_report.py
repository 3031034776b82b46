"""WasteReport Entity."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from waste_report.domain.enums import WasteType
from waste_report.domain.value_objects.coordinates import Coordinates


@dataclass(frozen=True)
class NewWasteReport:
    """저장 전 폐기물 신고 (id, created_at 미할당).

    Report Store가 id와 created_at을 부여하여 WasteReport로 반환합니다.
    """

    user_id: str
    image_url: str
    waste_type: WasteType
    disposal_method: str
    latitude: float
    longitude: float
    confidence: float
    points_awarded: int
    is_illegal_dumping: bool

    def __post_init__(self) -> None:
        if not self.disposal_method:
            raise ValueError("disposal_method must not be empty")
        if self.points_awarded < 0:
            raise ValueError("points_awarded must be non-negative")


@dataclass(frozen=True)
class WasteReport:
    """폐기물 신고 엔티티.

    분류 성공 시마다 생성되며, 저장 이후에는 변경되지 않습니다.
    """

    id: UUID
    user_id: str
    image_url: str
    waste_type: WasteType
    disposal_method: str
    latitude: float
    longitude: float
    confidence: float
    points_awarded: int
    is_illegal_dumping: bool
    created_at: datetime

    @property
    def gps_location(self) -> str:
        return Coordinates(self.latitude, self.longitude).as_location_string()

    def is_owned_by(self, user_id: str) -> bool:
        """신고자 확인."""
        return self.user_id == user_id

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 응답용)."""
        return {
            "id": str(self.id),
            "user_id": self.user_id,
            "image_url": self.image_url,
            "waste_type": self.waste_type.value,
            "disposal_method": self.disposal_method,
            "latitude": self.latitude,
            "longitude": self.longitude,
            "confidence": self.confidence,
            "points_awarded": self.points_awarded,
            "is_illegal_dumping": self.is_illegal_dumping,
            "created_at": self.created_at.isoformat(),
        }
