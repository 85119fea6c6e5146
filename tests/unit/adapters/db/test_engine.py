"""Unit tests for govcat.adapters.db.engine."""

import pytest
from sqlalchemy import text
from sqlalchemy.engine import URL

from govcat.adapters.db.engine import is_sqlite, make_engine

# pylint: disable=magic-value-comparison


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("sqlite:///:memory:", True),
        ("sqlite+pysqlite:///tmp/govcat.db", True),
        (URL.create("sqlite+pysqlite", database="x.db"), True),
        ("postgresql+psycopg://u:p@localhost/govcat", False),
    ],
)
def test_is_sqlite(url, expected):
    """Only SQLite URLs (any driver spelling) are detected as SQLite."""
    assert is_sqlite(url) is expected


def test_sqlite_pragmas_are_applied(tmp_path):
    """File-backed SQLite connections run in WAL mode with foreign keys on."""
    engine = make_engine(f"sqlite:///{tmp_path / 'pragmas.db'}")
    try:
        with engine.connect() as conn:
            assert conn.execute(text("PRAGMA foreign_keys")).scalar() == 1
            assert conn.execute(text("PRAGMA journal_mode")).scalar() == "wal"
    finally:
        engine.dispose()


def test_echo_flag_is_forwarded():
    """`echo=True` turns on SQLAlchemy statement logging."""
    engine = make_engine("sqlite:///:memory:", echo=True)
    assert engine.echo is True
    engine.dispose()
