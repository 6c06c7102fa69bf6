"""
Create missing tables, and outside production add missing columns

Usage:
    zelvix-db-sync            # create tables, add new nullable columns
    zelvix-db-sync --force    # drop and recreate every table (not in production)
"""

from sqlalchemy import inspect, text
from sqlalchemy.schema import CreateColumn
from typing import List
import argparse
import asyncio
import logging
import sys

from zelvix.core.config import settings
from zelvix.core.database import check_connection, close_db, engine
from zelvix.core.logging import setup_logging
from zelvix.models import Base

logger = logging.getLogger(__name__)

def add_missing_columns(sync_conn) -> List[str]:
    """
    ALTER existing tables to add model columns they lack

    Columns that are NOT NULL without a server default are skipped, since
    existing rows would have no value for them.
    """
    inspector = inspect(sync_conn)
    existing_tables = set(inspector.get_table_names())
    quote = sync_conn.dialect.identifier_preparer.quote
    added = []

    for table in Base.metadata.sorted_tables:
        if table.name not in existing_tables:
            continue

        present = {column["name"] for column in inspector.get_columns(table.name)}
        for column in table.columns:
            if column.name in present:
                continue
            if not column.nullable and column.server_default is None:
                logger.warning(f"Skipping {table.name}.{column.name}: NOT NULL without a server default")
                continue

            ddl = CreateColumn(column).compile(dialect=sync_conn.dialect)
            sync_conn.execute(text(f"ALTER TABLE {quote(table.name)} ADD COLUMN {ddl}"))
            added.append(f"{table.name}.{column.name}")

    return added

async def run_sync(force: bool = False) -> bool:
    try:
        logger.info("Connecting to database...")
        await check_connection()
        logger.info("Database connected")

        async with engine.begin() as conn:
            if force:
                logger.warning("Dropping all tables")
                await conn.run_sync(Base.metadata.drop_all)

            await conn.run_sync(Base.metadata.create_all)

            if not settings.is_production and not force:
                added = await conn.run_sync(add_missing_columns)
                for name in added:
                    logger.info(f"Added column {name}")

        logger.info("Tables created / synced successfully")
        return True
    except Exception as e:
        logger.exception(f"Database sync failed: {e}")
        return False
    finally:
        await close_db()

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create or update database tables")
    parser.add_argument(
        "--force",
        action="store_true",
        help="Drop and recreate all tables (refused in production)",
    )
    args = parser.parse_args(argv)

    setup_logging()
    if args.force and settings.is_production:
        logger.error("--force is not allowed in production")
        return 1

    return 0 if asyncio.run(run_sync(force=args.force)) else 1

if __name__ == "__main__":
    sys.exit(main())
