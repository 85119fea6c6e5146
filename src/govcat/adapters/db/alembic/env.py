"""Alembic environment for the GOVCAT catalogue schema.

The database URL comes from ``-x url=...``, then the ``sqlalchemy.url`` main
option (set by `govcat.config.build_alembic_config`), then ``GOVCAT_DB_URL``.
Type and server-default drift are compared during autogenerate; SQLite runs
in batch mode so ALTER TABLE can be emulated.
"""

from alembic import context
from sqlalchemy import create_engine, pool

import govcat.adapters.record_store.schema  # noqa: F401 # pylint: disable=unused-import
from govcat.adapters.db.metadata import metadata
from govcat.config import DatabaseUrlNotSetError, get_db_url

# pylint: disable=no-member

COMPARE_OPTIONS = {"compare_type": True, "compare_server_default": True}


def resolve_url() -> str:
    """Return the URL migrations should run against."""
    url = context.get_x_argument(as_dictionary=True).get("url")
    url = url or context.config.get_main_option("sqlalchemy.url")
    if url:
        return url
    try:
        return get_db_url()
    except DatabaseUrlNotSetError as e:
        raise RuntimeError("Set GOVCAT_DB_URL to your database URL.") from e


def run_migrations_offline() -> None:
    """Emit the migration SQL to the configured output without connecting."""
    context.configure(
        url=resolve_url(),
        target_metadata=metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **COMPARE_OPTIONS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply the migrations over a live connection."""
    engine = create_engine(resolve_url(), poolclass=pool.NullPool)
    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=metadata,
            render_as_batch=connection.dialect.name == "sqlite",
            **COMPARE_OPTIONS,
        )
        with context.begin_transaction():
            context.run_migrations()
    engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
