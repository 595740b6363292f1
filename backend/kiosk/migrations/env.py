"""
Alembic environment for the ORM backend

The Config is built in code by kiosk.bootstrap.migrations, so there is no
alembic.ini. A caller may share an open connection through
config.attributes["connection"]; otherwise one is opened from
sqlalchemy.url.
"""
from alembic import context
from sqlalchemy import engine_from_config, pool

from kiosk.core.database import Base
import kiosk.models  # noqa: F401  (registers every table on Base.metadata)

config = context.config

target_metadata = Base.metadata


def run_migrations_offline():
    """Emit SQL to stdout instead of running it"""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connection = config.attributes.get("connection", None)

    if connection is not None:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()
        return

    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
