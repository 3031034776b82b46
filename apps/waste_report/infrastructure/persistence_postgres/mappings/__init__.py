"""SQLAlchemy Core 테이블 정의."""

from waste_report.infrastructure.persistence_postgres.mappings.tables import (
    SCHEMA,
    illegal_dumping_zones_table,
    metadata,
    profiles_table,
    waste_reports_table,
)

__all__ = [
    "SCHEMA",
    "illegal_dumping_zones_table",
    "metadata",
    "profiles_table",
    "waste_reports_table",
]
