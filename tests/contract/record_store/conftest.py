"""Fixtures for RecordStore contract tests.

Every test in this package runs against each backend:

- ``memory``: `InMemoryRecordStore`
- ``sqlite_memory``: `SqlAlchemyRecordStore` on in-memory SQLite
- ``sqlite_file``: `SqlAlchemyRecordStore` on a migrated SQLite file
- ``postgres``: `SqlAlchemyRecordStore` on Postgres (skipped without Docker)

Engine fixtures are resolved lazily, so only the backend under test is built.
"""

from collections.abc import Iterable

import pytest

from govcat.adapters.record_store import InMemoryRecordStore, SqlAlchemyRecordStore
from govcat.interfaces.record_store import RecordStore

ENGINE_FIXTURES = {
    "sqlite_memory": "sqlite_engine_memory",
    "sqlite_file": "sqlite_engine_file",
    "postgres": "postgres_engine",
}


@pytest.fixture(params=["memory", "sqlite_memory", "sqlite_file", "postgres"])
def store(request: pytest.FixtureRequest) -> Iterable[RecordStore]:
    """Yield an empty RecordStore for the requested backend."""
    match request.param:
        case "memory":
            yield InMemoryRecordStore()
        case "sqlite_memory" | "sqlite_file" | "postgres":
            engine = request.getfixturevalue(ENGINE_FIXTURES[request.param])
            yield SqlAlchemyRecordStore(engine)
        case _:
            raise ValueError(f"unknown record store type: {request.param}")


@pytest.fixture(params=["memory", "sqlite_file", "postgres"])
def shared_store(request: pytest.FixtureRequest) -> Iterable[RecordStore]:
    """Yield a RecordStore that may be shared by several threads.

    In-memory SQLite is left out: each connection sees its own database.
    """
    match request.param:
        case "memory":
            yield InMemoryRecordStore()
        case "sqlite_file" | "postgres":
            engine = request.getfixturevalue(ENGINE_FIXTURES[request.param])
            yield SqlAlchemyRecordStore(engine)
        case _:
            raise ValueError(f"unknown record store type: {request.param}")
