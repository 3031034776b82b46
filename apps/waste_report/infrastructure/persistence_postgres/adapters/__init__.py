"""PostgreSQL Adapters."""

from waste_report.infrastructure.persistence_postgres.adapters.points_ledger_sqla import (
    SqlaPointsLedger,
)
from waste_report.infrastructure.persistence_postgres.adapters.report_repository_sqla import (
    SqlaReportRepository,
)
from waste_report.infrastructure.persistence_postgres.adapters.zone_reader_sqla import (
    SqlaZoneReader,
)

__all__ = ["SqlaPointsLedger", "SqlaReportRepository", "SqlaZoneReader"]
