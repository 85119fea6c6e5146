"""Configuration utilities for GOVCAT.

This module centralizes the environment variables and small helpers the
application reads its settings from.

| Variable             | Meaning                                             |
|----------------------|-----------------------------------------------------|
| `GOVCAT_DB_URL`      | SQLAlchemy URL of the catalogue database            |
| `GOVCAT_STRICT_LOAD` | fail (instead of skip) on malformed stored records  |
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV = "GOVCAT_DB_URL"  # pragma: no mutate
STRICT_LOAD_ENV = "GOVCAT_STRICT_LOAD"  # pragma: no mutate

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate

TRUTHY = frozenset({"1", "true", "yes", "on"})


class DatabaseUrlNotSetError(Exception):
    """Raised when the GOVCAT_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `GOVCAT_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `GOVCAT_DB_URL` is unset or empty.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url


def get_strict_load() -> bool:
    """Return True when `GOVCAT_STRICT_LOAD` is set to a truthy value."""
    return os.environ.get(STRICT_LOAD_ENV, "").strip().lower() in TRUTHY


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for GOVCAT's migrations.

    Sets only Alembic "main" options:
    - `sqlalchemy.url` → the database URL you pass
    - `script_location` → GOVCAT's packaged Alembic scripts

    Args:
        db_url: SQLAlchemy database URL. Can be `None` (default) only in
            contexts where Alembic won't need to connect to the DB.
        stdout: Text stream Alembic will write status lines to. Override in
            tests to capture output.

    Returns:
        An `alembic.config.Config` pointing to GOVCAT's migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("govcat.adapters.db.alembic")),
    )
    return cfg
