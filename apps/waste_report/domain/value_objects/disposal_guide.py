"""Disposal Guide Value Object."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from waste_report.domain.enums import WasteType
from waste_report.domain.exceptions.report import DisposalGuideIncompleteError

DEFAULT_DISPOSAL_METHODS: Mapping[WasteType, str] = MappingProxyType(
    {
        WasteType.PLASTIC: (
            "Clean and place in Blue Recycling Bin. Remove caps and labels for better recycling."
        ),
        WasteType.ORGANIC: (
            "Compost at home or place in Green Organic Waste Bin. "
            "Great for creating nutrient-rich soil!"
        ),
        WasteType.E_WASTE: (
            "Take to certified E-Waste collection center. Never throw electronics in regular trash."
        ),
        WasteType.GLASS: (
            "Clean and place in designated Glass Recycling Bin. Separate by color if required."
        ),
        WasteType.METAL: (
            "Clean cans and metal items, place in Metal Recycling Bin. "
            "Aluminum cans are highly recyclable!"
        ),
        WasteType.PAPER: (
            "Clean, dry paper goes in Paper Recycling Bin. Remove staples and plastic windows."
        ),
        WasteType.TEXTILE: (
            "Donate wearable clothes or take to textile recycling center. "
            "Consider upcycling projects!"
        ),
        WasteType.BIOMEDICAL: (
            "DANGER: Take to hospital or pharmacy for safe disposal. "
            "Never put in regular trash."
        ),
        WasteType.GENERAL: (
            "Place in Black General Waste Bin. "
            "Consider if item can be recycled or reused first."
        ),
    }
)


class DisposalGuide(Mapping[WasteType, str]):
    """폐기물 종류별 배출 방법 테이블 (불변).

    생성 시점에 모든 WasteType(GENERAL 포함)에 비어있지 않은 안내문이
    있는지 검증합니다. 조회는 항상 성공하며, 매핑되지 않은 값은
    GENERAL 안내로 대체됩니다.
    """

    __slots__ = ("_methods",)

    def __init__(self, methods: Mapping[WasteType, str] | None = None) -> None:
        source = DEFAULT_DISPOSAL_METHODS if methods is None else methods
        missing = [
            waste_type.value
            for waste_type in WasteType
            if not (source.get(waste_type) or "").strip()
        ]
        if missing:
            raise DisposalGuideIncompleteError(missing)
        self._methods: Mapping[WasteType, str] = MappingProxyType(
            {waste_type: source[waste_type].strip() for waste_type in WasteType}
        )

    def __getitem__(self, key: WasteType) -> str:
        return self._methods[key]

    def __iter__(self) -> Iterator[WasteType]:
        return iter(self._methods)

    def __len__(self) -> int:
        return len(self._methods)

    def method_for(self, waste_type: WasteType | str) -> str:
        """배출 방법 조회 (GENERAL fallback).

        Args:
            waste_type: WasteType 또는 라벨 문자열

        Returns:
            비어있지 않은 배출 안내문
        """
        if not isinstance(waste_type, WasteType):
            waste_type = WasteType.from_label(str(waste_type)) or WasteType.GENERAL
        return self._methods.get(waste_type, self._methods[WasteType.GENERAL])
