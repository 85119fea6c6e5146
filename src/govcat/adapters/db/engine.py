"""SQLAlchemy engine construction for GOVCAT databases."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

# applied to every new SQLite connection; PostgreSQL needs no per-connection setup
SQLITE_PRAGMAS = (
    "PRAGMA foreign_keys=ON",
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
    "PRAGMA temp_store=MEMORY",
    "PRAGMA busy_timeout=5000",
)


def is_sqlite(url: str | URL) -> bool:
    """Whether `url` (any driver spelling) names a SQLite database."""
    if isinstance(url, str):
        url = make_url(url)
    return url.get_backend_name() == "sqlite"


def _apply_sqlite_pragmas(dbapi_conn: Any, _record: Any) -> None:
    cursor = dbapi_conn.cursor()
    try:
        for pragma in SQLITE_PRAGMAS:
            cursor.execute(pragma)
    finally:
        cursor.close()


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create an engine for `url`, tuning SQLite connections on connect.

    Raises:
        sqlalchemy.exc.ArgumentError: If `url` cannot be parsed.
    """
    engine = create_engine(url, echo=echo)
    if is_sqlite(url):
        event.listen(engine, "connect", _apply_sqlite_pragmas)
    return engine
