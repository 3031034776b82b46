"""Waste Type Enum."""

from enum import Enum


class WasteType(str, Enum):
    """폐기물 종류.

    분류 결과는 항상 이 9개 값 중 하나입니다.
    GENERAL은 분류 실패 시의 기본값이자 배출 안내의 fallback입니다.
    """

    PLASTIC = "Plastic"
    ORGANIC = "Organic"
    E_WASTE = "E-Waste"
    GLASS = "Glass"
    METAL = "Metal"
    PAPER = "Paper"
    TEXTILE = "Textile"
    BIOMEDICAL = "Biomedical"
    GENERAL = "General"

    @classmethod
    def from_label(cls, label: str) -> "WasteType | None":
        """라벨 문자열에서 WasteType 조회 (대소문자 무시)."""
        normalized = label.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        return None
