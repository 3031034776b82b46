"""테스트 공용 상수/팩토리."""

from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from waste_report.domain.entities import NewWasteReport, WasteReport
from waste_report.domain.enums import WasteType

TEST_USER_ID = "user-123"
TEST_TOKEN = "valid-token"
IMAGE_URL = "https://cdn.example.com/waste-reports/user-123/1700000000000.jpg"


def to_report(draft: NewWasteReport) -> WasteReport:
    """저장소가 id/created_at을 부여한 것처럼 변환."""
    return WasteReport(
        id=uuid4(),
        user_id=draft.user_id,
        image_url=draft.image_url,
        waste_type=draft.waste_type,
        disposal_method=draft.disposal_method,
        latitude=draft.latitude,
        longitude=draft.longitude,
        confidence=draft.confidence,
        points_awarded=draft.points_awarded,
        is_illegal_dumping=draft.is_illegal_dumping,
        created_at=datetime.now(timezone.utc),
    )


def make_report(user_id: str = TEST_USER_ID, **overrides) -> WasteReport:
    values = dict(
        id=uuid4(),
        user_id=user_id,
        image_url=IMAGE_URL,
        waste_type=WasteType.GLASS,
        disposal_method="Clean and place in designated Glass Recycling Bin.",
        latitude=37.5665,
        longitude=126.978,
        confidence=0.8123,
        points_awarded=13,
        is_illegal_dumping=False,
        created_at=datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc),
    )
    values.update(overrides)
    return WasteReport(**values)
