"""Zone Matcher Service.

신고 좌표가 활성 불법투기 구역 반경 안에 있는지 판단합니다.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Iterable

from waste_report.application.report.ports import ZoneReader
from waste_report.domain.entities import DumpingZone
from waste_report.domain.services import distance_meters


@dataclass(frozen=True)
class ZoneCheckResult:
    """구역 검사 결과.

    Attributes:
        is_illegal_dumping: 활성 구역 반경 내 여부
        matched_zone_id: 매칭된 구역 ID
        lookup_error: 구역 조회 실패 사유 (fail-open 시 설정)
    """

    is_illegal_dumping: bool
    matched_zone_id: int | None = None
    lookup_error: str | None = None


class ZoneMatcher:
    """불법투기 구역 매처.

    구역 조회 실패/타임아웃은 요청을 막지 않고
    "구역 밖"으로 처리합니다 (fail-open). 로깅은 호출자가 담당합니다.
    """

    def __init__(self, zone_reader: ZoneReader, timeout_seconds: float = 10.0) -> None:
        self._zone_reader = zone_reader
        self._timeout_seconds = timeout_seconds

    @staticmethod
    def find_matching_zone(
        zones: Iterable[DumpingZone],
        latitude: float,
        longitude: float,
    ) -> DumpingZone | None:
        """좌표를 포함하는 첫 번째 활성 구역."""
        for zone in zones:
            if not zone.is_active:
                continue
            distance = distance_meters(latitude, longitude, zone.latitude, zone.longitude)
            if distance <= zone.effective_radius_meters:
                return zone
        return None

    async def check(self, latitude: float, longitude: float) -> ZoneCheckResult:
        """구역 검사."""
        try:
            zones = await asyncio.wait_for(
                self._zone_reader.list_active(),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            return ZoneCheckResult(is_illegal_dumping=False, lookup_error="zone lookup timed out")
        except Exception as e:
            error = str(e) or type(e).__name__
            return ZoneCheckResult(is_illegal_dumping=False, lookup_error=error)

        zone = self.find_matching_zone(zones, latitude, longitude)
        if zone is None:
            return ZoneCheckResult(is_illegal_dumping=False)
        return ZoneCheckResult(is_illegal_dumping=True, matched_zone_id=zone.id)

    async def is_illegal_dumping_zone(self, latitude: float, longitude: float) -> bool:
        """활성 구역 반경 내 여부."""
        result = await self.check(latitude, longitude)
        return result.is_illegal_dumping
