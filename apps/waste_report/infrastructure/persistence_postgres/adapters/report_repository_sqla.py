"""Report Repository SQLAlchemy Adapter.

ReportRepository의 PostgreSQL 구현체.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from waste_report.application.report.ports import ReportRepository
from waste_report.domain.entities import NewWasteReport, WasteReport
from waste_report.domain.enums import WasteType
from waste_report.infrastructure.persistence_postgres.mappings import (
    waste_reports_table as reports,
)

logger = logging.getLogger(__name__)


class SqlaReportRepository(ReportRepository):
    """Report Repository SQLAlchemy 구현체.

    호출마다 독립 트랜잭션을 사용합니다.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """초기화.

        Args:
            session_factory: AsyncSession 팩토리
        """
        self._session_factory = session_factory

    async def insert(self, report: NewWasteReport) -> WasteReport:
        """신고 저장 (id, created_at은 DB가 부여)."""
        stmt = (
            pg_insert(reports)
            .values(
                user_id=report.user_id,
                image_url=report.image_url,
                waste_type=report.waste_type.value,
                disposal_method=report.disposal_method,
                latitude=report.latitude,
                longitude=report.longitude,
                confidence=report.confidence,
                points_awarded=report.points_awarded,
                is_illegal_dumping=report.is_illegal_dumping,
            )
            .returning(*reports.c)
        )

        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(stmt)
                row = result.mappings().one()

        logger.debug("waste_report_inserted", extra={"report_id": str(row["id"])})
        return self._to_domain(row)

    async def get_by_id(self, report_id: UUID) -> WasteReport | None:
        stmt = select(reports).where(reports.c.id == report_id)
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            row = result.mappings().one_or_none()
        return self._to_domain(row) if row else None

    async def list_by_user(self, user_id: str, limit: int) -> Sequence[WasteReport]:
        stmt = (
            select(reports)
            .where(reports.c.user_id == user_id)
            .order_by(reports.c.created_at.desc())
            .limit(limit)
        )
        async with self._session_factory() as session:
            result = await session.execute(stmt)
            rows = result.mappings().all()
        return [self._to_domain(row) for row in rows]

    @staticmethod
    def _to_domain(row: Mapping[str, Any]) -> WasteReport:
        return WasteReport(
            id=row["id"],
            user_id=row["user_id"],
            image_url=row["image_url"],
            waste_type=WasteType.from_label(row["waste_type"]) or WasteType.GENERAL,
            disposal_method=row["disposal_method"],
            latitude=float(row["latitude"]),
            longitude=float(row["longitude"]),
            confidence=float(row["confidence"]),
            points_awarded=int(row["points_awarded"]),
            is_illegal_dumping=bool(row["is_illegal_dumping"]),
            created_at=row["created_at"],
        )
