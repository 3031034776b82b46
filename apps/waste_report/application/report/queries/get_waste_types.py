"""Get Waste Types Query - 폐기물 유형별 배출 방법."""

from __future__ import annotations

from dataclasses import dataclass

from waste_report.domain.value_objects import DisposalGuide


@dataclass(frozen=True)
class WasteTypeGuide:
    waste_type: str
    disposal_method: str


class GetWasteTypesQuery:
    """배출 안내 테이블 전체 조회. 인증 불필요."""

    def __init__(self, disposal_guide: DisposalGuide | None = None):
        self._disposal_guide = disposal_guide or DisposalGuide()

    def execute(self) -> list[WasteTypeGuide]:
        return [
            WasteTypeGuide(waste_type=waste_type.value, disposal_method=method)
            for waste_type, method in self._disposal_guide.items()
        ]
