#!/usr/bin/env python3
"""
Script: reset_database.py
Purpose: Drop the kiosk database so it can be recreated from scratch

WARNING: This deletes ALL data.

Connects to the administrative database (ADMIN_DATABASE, default "postgres"),
terminates open sessions on the target and drops it. With --recreate the
schema is then rebuilt for the chosen provider.

Usage:
    cd backend
    python scripts/reset_database.py --yes [--recreate --provider orm|sql]
"""
import argparse
import logging
import sys
from pathlib import Path

# Add backend to path
BACKEND_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BACKEND_DIR))

from dotenv import load_dotenv

load_dotenv(BACKEND_DIR / '.env')

import psycopg2

from kiosk.bootstrap import ensure_schema_ready
from kiosk.bootstrap.sql_script import drop_database
from kiosk.core.config import DataProvider, settings
from kiosk.core.database import database_name
from kiosk.core.exceptions import StorageUnavailable

logger = logging.getLogger("reset_database")


def main() -> int:
    parser = argparse.ArgumentParser(description="Drop (and optionally recreate) the kiosk database")
    parser.add_argument("--yes", action="store_true", help="Confirm that all data will be deleted")
    parser.add_argument("--recreate", action="store_true", help="Rebuild the schema after dropping")
    parser.add_argument(
        "--provider",
        choices=[p.value for p in DataProvider],
        default=settings.DATA_PROVIDER.value,
        help="Backend whose schema tooling rebuilds the database (with --recreate)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(levelname)s %(name)s: %(message)s")

    name = database_name(settings.DATABASE_URL)
    if not args.yes:
        logger.error(f"Refusing to drop {name} without --yes")
        return 2

    try:
        drop_database(settings.DATABASE_URL, settings.ADMIN_DATABASE)
    except psycopg2.Error as e:
        logger.error(f"Could not drop {name}: {e}")
        return 1

    if args.recreate:
        try:
            ensure_schema_ready(settings, DataProvider(args.provider))
        except StorageUnavailable as e:
            logger.error(f"Recreate failed: {e}")
            return 1

    logger.info("Database reset completed")
    return 0


if __name__ == "__main__":
    sys.exit(main())
