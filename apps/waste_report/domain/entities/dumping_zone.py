"""DumpingZone Entity."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ZONE_RADIUS_METERS = 100.0


@dataclass(frozen=True)
class DumpingZone:
    """불법투기 구역 엔티티 (읽기 전용).

    구역의 생성/해제는 외부(지자체 데이터)에서 관리합니다.
    """

    id: int | None
    latitude: float
    longitude: float
    radius_meters: float | None = None
    is_active: bool = True
    name: str | None = None

    @property
    def effective_radius_meters(self) -> float:
        """반경 (미설정 또는 0 이하이면 100m)."""
        if self.radius_meters is None or self.radius_meters <= 0:
            return DEFAULT_ZONE_RADIUS_METERS
        return float(self.radius_meters)
