"""
PostgreSQL database access

This module centralizes BOTH ways the kiosk talks to the database:
- SQLAlchemy ORM (Backend A: change-tracked sessions)
- psycopg2 direct connections (Backend B: raw parameterized SQL)

Nothing here opens a connection at import time; the process entry point
decides which backend to build and passes the URL in.
"""
import logging

import psycopg2
import psycopg2.extras
from psycopg2.extras import RealDictCursor
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)

# Seconds to wait for the server before giving up (psycopg2 connect_timeout)
CONNECTION_TIMEOUT = 10

# Let psycopg2 send/receive uuid.UUID values natively
psycopg2.extras.register_uuid()


# ============================================================================
# SQLAlchemy Configuration (Backend A)
# ============================================================================

# Base for ORM models
Base = declarative_base()


def create_db_engine(database_url: str, **kwargs) -> Engine:
    """
    Build a SQLAlchemy engine.

    PostgreSQL URLs get a connection pool sized for a small web app;
    other dialects (SQLite in tests) keep SQLAlchemy's defaults.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "postgresql":
        kwargs.setdefault("pool_pre_ping", True)
        kwargs.setdefault("pool_size", 10)
        kwargs.setdefault("max_overflow", 20)
    return create_engine(url, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Session factory; one session per unit of work"""
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


# ============================================================================
# psycopg2 Direct Connections (Backend B)
# ============================================================================

def to_libpq_url(database_url: str) -> str:
    """
    Convert a SQLAlchemy URL into one libpq/psycopg2 understands.

    "postgresql+psycopg2://u:p@h/db" -> "postgresql://u:p@h/db"
    """
    url = make_url(database_url).set(drivername="postgresql")
    return url.render_as_string(hide_password=False)


def database_name(database_url: str) -> str:
    """Name of the database a URL points at"""
    return make_url(database_url).database


def with_database(database_url: str, name: str) -> str:
    """Same server and credentials, different database"""
    url = make_url(database_url).set(database=name)
    return url.render_as_string(hide_password=False)


def get_db_connection(database_url: str):
    """
    Get a direct psycopg2 database connection (returns tuples)

    Example:
        conn = get_db_connection(url)
        cursor = conn.cursor()
        cursor.execute("SELECT 1")
        cursor.close()
        conn.close()
    """
    if not database_url:
        raise Exception("DATABASE_URL not configured")

    return psycopg2.connect(to_libpq_url(database_url), connect_timeout=CONNECTION_TIMEOUT)


def get_db_connection_dict(database_url: str):
    """
    Get a database connection with RealDictCursor (returns dictionaries)

    Example:
        conn = get_db_connection_dict(url)
        cursor = conn.cursor()
        cursor.execute("SELECT * FROM customers")
        rows = cursor.fetchall()  # list of dicts
        cursor.close()
        conn.close()
    """
    if not database_url:
        raise Exception("DATABASE_URL not configured")

    return psycopg2.connect(
        to_libpq_url(database_url),
        cursor_factory=RealDictCursor,
        connect_timeout=CONNECTION_TIMEOUT,
    )
