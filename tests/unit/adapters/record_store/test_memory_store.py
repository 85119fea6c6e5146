"""Unit tests for InMemoryRecordStore specifics not covered by the contract."""

import logging

import pytest

from govcat.adapters.record_store import InMemoryRecordStore
from govcat.interfaces.record_store import SerializationError

# pylint: disable=magic-value-comparison


def test_len_counts_keys():
    """len() is the number of distinct keys."""
    store = InMemoryRecordStore()
    store.set("a", 1)
    store.set("b", 2)
    store.set("a", 3)
    assert len(store) == 2


def test_values_are_kept_as_json_text():
    """Tuples come back as lists, exactly as a JSON backend would return them."""
    store = InMemoryRecordStore()
    store.set("k", {"tags": ("a", "b")})
    assert store.get("k") == {"tags": ["a", "b"]}


def test_serialization_failure_is_logged(caplog):
    """Rejected values are logged at ERROR with their key."""
    store = InMemoryRecordStore()
    with caplog.at_level(logging.ERROR, logger="govcat.adapters.record_store"):
        with pytest.raises(SerializationError, match="could not be serialized"):
            store.set("service:bad", {"x": object()})
    assert "Cannot serialize value for service:bad" in caplog.text
