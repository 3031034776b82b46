"""Waste Report HTTP 스키마."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from waste_report.domain.entities import WasteReport
from waste_report.domain.enums import NotificationStatus
from waste_report.domain.value_objects import ClassificationResult


class SubmitReportBody(BaseModel):
    """신고 접수 요청 스키마.

    필수 여부는 인증 이후 Command에서 검증하므로 모든 필드를 optional로 둡니다.
    """

    image: str | None = Field(default=None, description="base64 이미지 (data URL 허용)")
    latitude: float | None = Field(default=None, description="위도")
    longitude: float | None = Field(default=None, description="경도")
    filename: str | None = Field(default=None, description="원본 파일명 (분류 힌트)")


class SubmitReportResponseSchema(BaseModel):
    """신고 접수 응답 스키마."""

    status: str = Field(default="success")
    report_id: str = Field(description="신고 ID (UUID)")
    waste_type: str
    disposal_method: str
    confidence: float = Field(description="분류 신뢰도 (소수 둘째 자리)")
    eco_points_awarded: int
    gps_location: str = Field(description='"<lat>,<lon>"')
    is_illegal_dumping: bool
    message: str
    points_credited: bool = Field(description="포인트 적립 성공 여부")
    notification: NotificationStatus = Field(description="불법투기 알림 상태")


class WasteReportSchema(BaseModel):
    """신고 조회 스키마."""

    id: str
    image_url: str
    waste_type: str
    disposal_method: str
    latitude: float
    longitude: float
    gps_location: str
    confidence: float
    points_awarded: int
    is_illegal_dumping: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, report: WasteReport) -> WasteReportSchema:
        return cls(
            id=str(report.id),
            image_url=report.image_url,
            waste_type=report.waste_type.value,
            disposal_method=report.disposal_method,
            latitude=report.latitude,
            longitude=report.longitude,
            gps_location=report.gps_location,
            confidence=ClassificationResult(report.waste_type, report.confidence).rounded_confidence,
            points_awarded=report.points_awarded,
            is_illegal_dumping=report.is_illegal_dumping,
            created_at=report.created_at,
        )


class WasteReportListSchema(BaseModel):
    items: list[WasteReportSchema]
    count: int


class WasteTypeSchema(BaseModel):
    waste_type: str
    disposal_method: str
