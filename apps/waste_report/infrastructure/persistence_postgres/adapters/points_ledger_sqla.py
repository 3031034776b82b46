"""Points Ledger SQLAlchemy Adapter."""

from __future__ import annotations

from sqlalchemy import func
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from waste_report.application.report.ports import PointsLedger
from waste_report.infrastructure.persistence_postgres.mappings import profiles_table as profiles


class SqlaPointsLedger(PointsLedger):
    """EcoPoints 원장 (profiles.eco_points).

    read-modify-write 없이 SQL에서 원자적으로 증가시킵니다.
    프로필이 없으면 delta 값으로 생성합니다.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def increment(self, user_id: str, delta: int) -> None:
        stmt = pg_insert(profiles).values(user_id=user_id, eco_points=delta)
        stmt = stmt.on_conflict_do_update(
            index_elements=[profiles.c.user_id],
            set_={
                "eco_points": profiles.c.eco_points + stmt.excluded.eco_points,
                "updated_at": func.now(),
            },
        )
        async with self._session_factory() as session:
            async with session.begin():
                await session.execute(stmt)
