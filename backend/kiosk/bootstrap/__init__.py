"""
Schema bootstrap

ensure_schema_ready() prepares the database for the configured backend:
- orm: Alembic migrations (stamp when tables already exist)
- sql: idempotent initialization script
"""
import logging
from typing import Optional

from sqlalchemy.engine import make_url

from kiosk.bootstrap.migrations import ensure_orm_schema
from kiosk.bootstrap.sql_script import ensure_database, ensure_sql_schema
from kiosk.core.config import DataProvider, Settings
from kiosk.core.database import create_db_engine

logger = logging.getLogger(__name__)


def ensure_schema_ready(settings: Settings, provider: Optional[DataProvider] = None) -> None:
    """Create or migrate the schema for `provider` (defaults to settings.DATA_PROVIDER)"""
    provider = DataProvider(provider or settings.DATA_PROVIDER)
    logger.info(f"Preparing schema for the {provider.value} backend")

    if provider is DataProvider.SQL:
        ensure_sql_schema(settings.DATABASE_URL, settings.ADMIN_DATABASE)
        return

    if make_url(settings.DATABASE_URL).get_backend_name() == "postgresql":
        ensure_database(settings.DATABASE_URL, settings.ADMIN_DATABASE)

    engine = create_db_engine(settings.DATABASE_URL)
    try:
        ensure_orm_schema(engine)
    finally:
        engine.dispose()


__all__ = [
    'ensure_schema_ready',
    'ensure_orm_schema',
    'ensure_sql_schema',
    'ensure_database',
]
