"""
Schema bootstrap for the direct-SQL backend

Creates the target database through the administrative database when it is
missing, then runs scripts/initialize_database.sql. The script only uses
IF NOT EXISTS / WHERE NOT EXISTS, so running it again changes nothing.
"""
import logging
from pathlib import Path

import psycopg2
from psycopg2 import sql

from kiosk.core.database import database_name, get_db_connection, with_database
from kiosk.core.exceptions import StorageUnavailable

logger = logging.getLogger(__name__)

INIT_SCRIPT = Path(__file__).resolve().parent / "scripts" / "initialize_database.sql"


def load_init_script() -> str:
    return INIT_SCRIPT.read_text(encoding="utf-8")


def database_exists(database_url: str, admin_database: str = "postgres") -> bool:
    """Check pg_database through the administrative database"""
    name = database_name(database_url)
    conn = get_db_connection(with_database(database_url, admin_database))
    cursor = conn.cursor()

    try:
        cursor.execute("SELECT 1 FROM pg_database WHERE datname = %s", (name,))
        return cursor.fetchone() is not None
    finally:
        cursor.close()
        conn.close()


def create_database(database_url: str, admin_database: str = "postgres") -> None:
    """CREATE DATABASE cannot run inside a transaction, hence autocommit"""
    name = database_name(database_url)
    conn = get_db_connection(with_database(database_url, admin_database))
    conn.autocommit = True
    cursor = conn.cursor()

    try:
        cursor.execute(sql.SQL("CREATE DATABASE {}").format(sql.Identifier(name)))
        logger.info(f"Database {name} created")
    finally:
        cursor.close()
        conn.close()


def drop_database(database_url: str, admin_database: str = "postgres") -> bool:
    """
    Drop the target database, disconnecting other sessions first.

    Returns False when there was nothing to drop.
    """
    name = database_name(database_url)
    conn = get_db_connection(with_database(database_url, admin_database))
    conn.autocommit = True
    cursor = conn.cursor()

    try:
        cursor.execute("SELECT 1 FROM pg_database WHERE datname = %s", (name,))
        if cursor.fetchone() is None:
            logger.info(f"Database {name} does not exist")
            return False

        cursor.execute("""
            SELECT pg_terminate_backend(pid)
            FROM pg_stat_activity
            WHERE datname = %s AND pid <> pg_backend_pid()
        """, (name,))
        cursor.execute(sql.SQL("DROP DATABASE {}").format(sql.Identifier(name)))
        logger.info(f"Database {name} dropped")
        return True
    finally:
        cursor.close()
        conn.close()


def ensure_database(database_url: str, admin_database: str = "postgres") -> bool:
    """Create the target database if missing. Returns True when it was created."""
    try:
        if database_exists(database_url, admin_database):
            logger.info(f"Database {database_name(database_url)} already exists")
            return False
        create_database(database_url, admin_database)
        return True
    except psycopg2.Error as e:
        logger.error(f"Could not provision database {database_name(database_url)}: {e}")
        raise StorageUnavailable(f"Could not provision database: {e}") from e


def ensure_sql_schema(database_url: str, admin_database: str = "postgres") -> None:
    """Create the database if needed, then apply the idempotent init script"""
    ensure_database(database_url, admin_database)

    try:
        conn = get_db_connection(database_url)
    except psycopg2.Error as e:
        logger.error(f"Could not connect to database: {e}")
        raise StorageUnavailable(f"Could not connect to database: {e}") from e

    cursor = conn.cursor()
    try:
        cursor.execute(load_init_script())
        conn.commit()
        logger.info(f"Initialization script applied to {database_name(database_url)}")
    except psycopg2.Error as e:
        conn.rollback()
        logger.error(f"Initialization script failed: {e}")
        raise StorageUnavailable(f"Initialization script failed: {e}") from e
    finally:
        cursor.close()
        conn.close()
