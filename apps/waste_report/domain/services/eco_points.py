"""EcoPoints 지급 정책."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BASE_POINTS = 10


class PointsScheme(str, Enum):
    """포인트 지급 방식."""

    FLAT = "flat"
    TIERED = "tiered"


@dataclass(frozen=True, slots=True)
class EcoPointsPolicy:
    """신고 1건당 EcoPoints 계산.

    - flat: 항상 기본 10점
    - tiered: 기본 10점 + 신뢰도 > 0.9 이면 +5, > 0.8 이면 +3

    Attributes:
        scheme: 지급 방식
        base_points: 기본 지급 포인트 (하한)
        tiers: (신뢰도 초과 기준, 보너스) 목록, 기준 내림차순
    """

    scheme: PointsScheme = PointsScheme.TIERED
    base_points: int = BASE_POINTS
    tiers: tuple[tuple[float, int], ...] = ((0.9, 5), (0.8, 3))

    def points_for(self, confidence: float) -> int:
        """신뢰도에 따른 지급 포인트."""
        if self.scheme is PointsScheme.FLAT:
            return self.base_points
        for threshold, bonus in self.tiers:
            if confidence > threshold:
                return self.base_points + bonus
        return self.base_points
