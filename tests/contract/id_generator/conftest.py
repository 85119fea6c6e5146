"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from govcat.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from govcat.interfaces.id_generator import IdGenerator


@pytest.fixture(params=["ulid", "uuid4", "simple"])
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a brand-new IdGenerator for each supported backend."""
    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "uuid4":
            yield UUIDv4Generator()
        case "simple":
            yield SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown id generator type: {request.param}")


@pytest.fixture(params=["ulid", "simple"])
def ordered_id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield IdGenerators whose ids sort in issue order."""
    match request.param:
        case "ulid":
            yield ULIDGenerator()
        case "simple":
            yield SimpleIdGenerator()
        case _:
            raise ValueError(f"unknown ordered id generator type: {request.param}")
