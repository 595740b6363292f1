#!/usr/bin/env python3
"""
Script: init_database.py
Purpose: Create or migrate the kiosk schema for one backend

- orm: Alembic migrations (stamps the ledger if the tables already exist)
- sql: creates the database if missing, then runs initialize_database.sql

Both paths are safe to run repeatedly.

Usage:
    cd backend
    python scripts/init_database.py [--provider orm|sql]
"""
import argparse
import logging
import sys
from pathlib import Path

# Add backend to path
BACKEND_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BACKEND_DIR))

from dotenv import load_dotenv

# Load environment before settings are read
load_dotenv(BACKEND_DIR / '.env')

from kiosk.bootstrap import ensure_schema_ready
from kiosk.core.config import DataProvider, settings
from kiosk.core.database import database_name
from kiosk.core.exceptions import StorageUnavailable

logger = logging.getLogger("init_database")


def main() -> int:
    parser = argparse.ArgumentParser(description="Initialize the kiosk database schema")
    parser.add_argument(
        "--provider",
        choices=[p.value for p in DataProvider],
        default=settings.DATA_PROVIDER.value,
        help="Backend whose schema tooling to use (default: DATA_PROVIDER)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        ensure_schema_ready(settings, DataProvider(args.provider))
    except StorageUnavailable as e:
        logger.error(f"Initialization failed: {e}")
        return 1

    logger.info(f"Database {database_name(settings.DATABASE_URL)} is ready ({args.provider} provider)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
