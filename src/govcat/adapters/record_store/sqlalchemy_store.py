"""SQLAlchemy-backed RecordStore adapter.

Stores records in the ``kv_store`` table (see `.schema`), one row per key,
on PostgreSQL or SQLite.

- `set` is an upsert (``INSERT ... ON CONFLICT (key) DO UPDATE``) in its own
  transaction, so a write to one key is atomic.
- `get_by_prefix` narrows rows with an escaped ``LIKE 'prefix%'`` and then
  re-checks the prefix in Python: SQLite's ``LIKE`` ignores ASCII case, but
  prefix matching is case-sensitive.
- SQLAlchemy errors are mapped to `StoreUnavailableError` and stored values
  that are not valid JSON to `SerializationError`; nothing is retried here.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from govcat.adapters.db.dialects import DialectName
from govcat.interfaces.record_store import (
    JsonValue,
    RecordStore,
    SerializationError,
    StoreUnavailableError,
)

from .schema import kv_store

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

__all__ = ["SqlAlchemyRecordStore"]

logger = logging.getLogger(__name__)


class SqlAlchemyRecordStore(RecordStore):
    """RecordStore implementation that supports both Postgres and SQLite.

    Args:
        engine: Engine bound to a database migrated to Alembic head (or with
            ``metadata.create_all`` applied).

    Raises:
        UnsupportedDialect: If the engine is neither PostgreSQL nor SQLite.
    """

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.dialect = DialectName.from_sqlalchemy(engine)

    # --- reads ---

    def get(self, key: str) -> JsonValue | None:
        stmt = select(kv_store.c.value).where(kv_store.c.key == key)
        try:
            with self.engine.connect() as conn:
                row = conn.execute(stmt).fetchone()
                value = None if row is None else row.value
        except SQLAlchemyError as e:
            raise self._unavailable("get", key, e) from e
        except ValueError as e:
            raise self._undecodable(key, e) from e
        return value

    def get_by_prefix(self, prefix: str) -> list[JsonValue]:
        stmt = select(kv_store.c.key, kv_store.c.value).where(
            kv_store.c.key.startswith(prefix, autoescape=True)
        )
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).fetchall()
                values = [row.value for row in rows if row.key.startswith(prefix)]
        except SQLAlchemyError as e:
            raise self._unavailable("get_by_prefix", prefix, e) from e
        except ValueError as e:
            raise self._undecodable(prefix, e) from e
        return values

    # --- writes ---

    def set(self, key: str, value: JsonValue) -> None:
        self._check_serializable(key, value)

        insert = self.dialect.insert(kv_store).values(key=key, value=value)
        stmt = insert.on_conflict_do_update(
            index_elements=[kv_store.c.key],
            set_={"value": insert.excluded.value},
        )
        try:
            with self.engine.begin() as conn:
                conn.execute(stmt)
        except SQLAlchemyError as e:
            raise self._unavailable("set", key, e) from e
        logger.debug("Upserted %s", key)

    # --- helpers ---

    @staticmethod
    def _check_serializable(key: str, value: JsonValue) -> None:
        if value is None:
            raise SerializationError(key, "None cannot be stored")
        try:
            json.dumps(value, allow_nan=False)
        except (TypeError, ValueError) as e:
            logger.error("Cannot serialize value for %s: %s", key, e)
            raise SerializationError(key, str(e)) from e

    @staticmethod
    def _undecodable(key: str, error: ValueError) -> SerializationError:
        logger.error("Stored value under %r is not valid JSON: %s", key, error)
        return SerializationError(key, f"stored value is not valid JSON ({error})")

    @staticmethod
    def _unavailable(
        operation: str, key: str, error: SQLAlchemyError
    ) -> StoreUnavailableError:
        logger.error("Record store %s(%r) failed: %s", operation, key, error)
        reason = str(error).splitlines()[0] if str(error) else type(error).__name__
        return StoreUnavailableError(operation, key, reason)
