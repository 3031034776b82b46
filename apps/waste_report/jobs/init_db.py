"""Initialize database schema and tables for waste report service."""

from __future__ import annotations

import asyncio
import sys

from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from waste_report.infrastructure.persistence_postgres.mappings import SCHEMA, metadata
from waste_report.setup.config import get_settings


async def init_db() -> int:
    """Create schema and tables (pgcrypto must be available for gen_random_uuid)."""
    settings = get_settings()
    print(
        "🔗 Connecting to database: "
        f"{settings.database_url.split('@')[1] if '@' in settings.database_url else 'database'}"
    )

    engine = create_async_engine(settings.database_url, echo=False)

    try:
        async with engine.begin() as conn:
            exists = await conn.scalar(
                text("SELECT 1 FROM information_schema.schemata WHERE schema_name = :schema_name"),
                {"schema_name": SCHEMA},
            )
            if exists:
                print(f"ℹ️  Schema '{SCHEMA}' already exists; skipping creation.")
            else:
                print(f"📦 Creating '{SCHEMA}' schema...")
                await conn.execute(text(f"CREATE SCHEMA IF NOT EXISTS {SCHEMA}"))

            print("📦 Creating database tables...")
            await conn.run_sync(metadata.create_all)

        print("✅ Database initialization completed!\n")
        print("📋 Tables:")
        for table in metadata.sorted_tables:
            print(f"   - {table.fullname}")
        return 0
    except Exception as exc:  # pragma: no cover - diagnostic output
        print(f"❌ Error initializing database: {exc}")
        import traceback

        traceback.print_exc()
        return 1
    finally:
        await engine.dispose()


def main() -> None:
    """Entry point for database initialization."""
    exit_code = asyncio.run(init_db())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
