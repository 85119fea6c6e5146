"""The two SQL backends the record store runs on, and their upsert ``INSERT``."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any

from sqlalchemy.dialects import postgresql, sqlite

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine

_ALIASES = {
    "postgresql": "postgresql",
    "postgres": "postgresql",
    "pg": "postgresql",
    "sqlite": "sqlite",
}


class UnsupportedDialect(Exception):
    """The database is neither PostgreSQL nor SQLite."""


class DialectName(str, Enum):
    """Backend identifier, valued with SQLAlchemy's ``dialect.name``."""

    POSTGRES = "postgresql"
    SQLITE = "sqlite"

    @classmethod
    def from_string(cls, dialect_str: str | None) -> DialectName:
        """Map ``"postgres"``, ``"postgresql+psycopg"``, ``"sqlite+pysqlite"``...

        The driver suffix and case are ignored.

        Raises:
            UnsupportedDialect: For any other backend.
        """
        backend = (dialect_str or "").strip().lower().partition("+")[0]
        if backend not in _ALIASES:
            raise UnsupportedDialect(f"Unsupported dialect: {dialect_str!r}")
        return cls(_ALIASES[backend])

    @classmethod
    def from_sqlalchemy(cls, obj: Engine | Connection) -> DialectName:
        """Identify the backend behind an engine or connection.

        Raises:
            UnsupportedDialect: If `obj` has no ``dialect.name`` or names an
                unsupported backend.
        """
        dialect = getattr(obj, "dialect", None)
        name = getattr(dialect, "name", None)
        if name is None:
            raise UnsupportedDialect(
                f"{type(obj).__name__} does not expose .dialect.name"
            )
        return cls.from_string(name)

    @property
    def insert(self) -> Callable[..., Any]:
        """``insert()`` of this backend; its statements offer ``on_conflict_do_update``."""
        return postgresql.insert if self is DialectName.POSTGRES else sqlite.insert
