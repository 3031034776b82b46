"""Waste Report 테이블 정의 (waste_report 스키마).

엔티티가 불변 dataclass이므로 ORM 매핑 없이 Core Table만 사용합니다.
"""

from __future__ import annotations

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    Float,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
    text,
)
from sqlalchemy.dialects.postgresql import UUID

SCHEMA = "waste_report"

metadata = MetaData(schema=SCHEMA)

waste_reports_table = Table(
    "waste_reports",
    metadata,
    Column(
        "id",
        UUID(as_uuid=True),
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    ),
    Column("user_id", String(64), nullable=False, index=True),
    Column("image_url", String(1024), nullable=False),
    Column("waste_type", String(32), nullable=False),
    Column("disposal_method", Text, nullable=False),
    Column("latitude", Float, nullable=False),
    Column("longitude", Float, nullable=False),
    Column("confidence", Float, nullable=False),
    Column("points_awarded", Integer, nullable=False, server_default="0"),
    Column("is_illegal_dumping", Boolean, nullable=False, server_default=text("false")),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

illegal_dumping_zones_table = Table(
    "illegal_dumping_zones",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("name", String(200), nullable=True),
    Column("latitude", Float, nullable=False),
    Column("longitude", Float, nullable=False),
    Column("radius_meters", Float, nullable=True),
    Column("is_active", Boolean, nullable=False, server_default=text("true"), index=True),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)

profiles_table = Table(
    "profiles",
    metadata,
    Column("user_id", String(64), primary_key=True),
    Column("eco_points", Integer, nullable=False, server_default="0"),
    Column(
        "updated_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    ),
)
