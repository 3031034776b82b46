"""Zone Reader Port."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from waste_report.domain.entities import DumpingZone


class ZoneReader(ABC):
    """불법투기 구역 조회 포트.

    Infrastructure Layer에서 구현합니다.
    """

    @abstractmethod
    async def list_active(self) -> Sequence[DumpingZone]:
        """활성화된 구역 전체 조회."""
        raise NotImplementedError
