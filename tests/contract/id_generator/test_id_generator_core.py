"""Contract tests for IdGenerator implementations."""

from __future__ import annotations

import concurrent.futures as cf
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from govcat.interfaces.id_generator import IdGenerator


def test_returns_non_empty_str(id_generator: IdGenerator) -> None:
    """new_id() returns a non-empty string."""
    new_id = id_generator.new_id()
    assert isinstance(new_id, str)
    assert new_id != ""


def test_returns_unique_ids(id_generator: IdGenerator) -> None:
    """Consecutive ids never repeat."""
    ids = [id_generator.new_id() for _ in range(2000)]
    assert len(ids) == len(set(ids))


def test_ids_are_usable_in_store_keys(id_generator: IdGenerator) -> None:
    """Ids contain no whitespace or ':' so ``service:<id>`` keys stay unambiguous."""
    new_id = id_generator.new_id()
    assert ":" not in new_id
    assert new_id == new_id.strip()
    assert " " not in new_id


def test_threaded_uniqueness_single_instance(id_generator: IdGenerator) -> None:
    """One generator shared by many threads still hands out unique ids."""

    def _next(_: int) -> str:
        return id_generator.new_id()

    n = 4000
    with cf.ThreadPoolExecutor(max_workers=16) as ex:
        ids = list(ex.map(_next, range(n)))

    assert len(ids) == len(set(ids))


def test_ids_sort_in_issue_order(ordered_id_generator: IdGenerator) -> None:
    """Ordered generators issue ids that sort lexicographically in issue order."""
    ids = [ordered_id_generator.new_id() for _ in range(500)]
    assert ids == sorted(ids)
