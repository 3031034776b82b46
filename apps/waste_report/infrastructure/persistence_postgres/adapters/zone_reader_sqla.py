"""SQLAlchemy Zone Reader Implementation."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from waste_report.application.report.ports import ZoneReader
from waste_report.domain.entities import DumpingZone
from waste_report.infrastructure.persistence_postgres.mappings import (
    illegal_dumping_zones_table as zones,
)


class SqlaZoneReader(ZoneReader):
    """SQLAlchemy 기반 불법투기 구역 Reader.

    구역 수가 적어 전체 활성 구역을 읽고 거리 계산은 애플리케이션에서 수행합니다.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def list_active(self) -> Sequence[DumpingZone]:
        query = select(
            zones.c.id,
            zones.c.latitude,
            zones.c.longitude,
            zones.c.radius_meters,
            zones.c.is_active,
            zones.c.name,
        ).where(zones.c.is_active.is_(True))

        async with self._session_factory() as session:
            result = await session.execute(query)
            rows = result.mappings().all()

        return [
            DumpingZone(
                id=row["id"],
                latitude=float(row["latitude"]),
                longitude=float(row["longitude"]),
                radius_meters=row["radius_meters"],
                is_active=bool(row["is_active"]),
                name=row["name"],
            )
            for row in rows
        ]
