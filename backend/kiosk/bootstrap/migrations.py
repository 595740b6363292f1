"""
Schema bootstrap for the ORM backend (Alembic)

The migration ledger is Alembic's alembic_version table. A database whose
tables were created some other way (for example by the direct-SQL script)
has no ledger yet; it is stamped at head instead of re-created.
"""
import logging
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from kiosk.core.exceptions import StorageUnavailable
from kiosk.models import EXPECTED_TABLES

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "migrations"

# What ensure_orm_schema did
STAMPED = "stamped"
UPGRADED = "upgraded"
UP_TO_DATE = "up_to_date"


def alembic_config(database_url: str) -> Config:
    """Alembic Config pointing at kiosk/migrations, no alembic.ini needed"""
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    # ConfigParser interpolation: a literal % in a password must be doubled
    cfg.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))
    return cfg


def head_revision(cfg: Config) -> str:
    return ScriptDirectory.from_config(cfg).get_current_head()


def ensure_orm_schema(engine: Engine) -> str:
    """
    Bring the database up to the latest migration.

    - all tables present, no ledger  -> stamp head (no DDL)
    - no tables                      -> upgrade head
    - some tables, no ledger         -> warn, then upgrade head
    - ledger present                 -> upgrade head (applies pending revisions)

    Returns one of STAMPED, UPGRADED, UP_TO_DATE.
    """
    cfg = alembic_config(engine.url.render_as_string(hide_password=False))
    head = head_revision(cfg)

    try:
        with engine.begin() as connection:
            cfg.attributes["connection"] = connection

            existing = set(inspect(connection).get_table_names())
            present = [name for name in EXPECTED_TABLES if name in existing]
            current = MigrationContext.configure(connection).get_current_revision()

            if current is None and len(present) == len(EXPECTED_TABLES):
                logger.info(f"All {len(EXPECTED_TABLES)} tables exist without a migration ledger; stamping {head}")
                command.stamp(cfg, "head")
                return STAMPED

            if current is None and present:
                missing = [name for name in EXPECTED_TABLES if name not in existing]
                logger.warning(
                    f"Partial schema found ({len(present)}/{len(EXPECTED_TABLES)} tables, missing: "
                    f"{', '.join(missing)}); attempting upgrade to {head}"
                )

            if current == head:
                logger.info(f"Schema is at head ({head})")
                return UP_TO_DATE

            logger.info(f"Upgrading schema from {current or 'empty'} to {head}")
            command.upgrade(cfg, "head")
            return UPGRADED
    except SQLAlchemyError as e:
        logger.error(f"Schema migration failed: {e}")
        raise StorageUnavailable(f"Schema migration failed: {e}") from e
