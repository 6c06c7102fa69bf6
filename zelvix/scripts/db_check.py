"""
Check that the configured database accepts connections

Usage:
    zelvix-db-check
"""

import argparse
import asyncio
import logging
import sys

from zelvix.core.database import check_connection, close_db
from zelvix.core.logging import setup_logging

logger = logging.getLogger(__name__)

async def run_check() -> bool:
    logger.info("Checking database connection...")
    try:
        await check_connection()
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
    finally:
        await close_db()

    logger.info("Database connected successfully")
    return True

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Check the database connection")
    parser.parse_args(argv)

    setup_logging()
    return 0 if asyncio.run(run_check()) else 1

if __name__ == "__main__":
    sys.exit(main())
