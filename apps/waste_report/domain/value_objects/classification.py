"""Classification Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from waste_report.domain.enums import WasteType


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """폐기물 분류 결과 Value Object.

    요청마다 생성되며 별도로 저장되지 않고 WasteReport에 합쳐집니다.

    Attributes:
        waste_type: 폐기물 종류
        confidence: 신뢰도 (0.0 ~ 1.0)
    """

    waste_type: WasteType
    confidence: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be within [0, 1], got {self.confidence}")

    @property
    def rounded_confidence(self) -> float:
        """소수점 2자리 반올림(half-up) 신뢰도 (API 응답용)."""
        rounded = Decimal(str(self.confidence)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        return float(rounded)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환."""
        return {
            "waste_type": self.waste_type.value,
            "confidence": self.confidence,
        }
