"""Interface for a key-prefixed record store.

Defines the `RecordStore` abstraction: a mapping from string keys to
JSON-compatible values with point reads, overwriting writes, and prefix
scans. Keys are usually namespaced (``"service:<id>"``) so that a prefix scan
yields exactly one kind of record.
"""

from __future__ import annotations

import abc
from typing import Any, TypeAlias

#: Any value the store can serialize: dicts, lists, strings, numbers, bools, None.
JsonValue: TypeAlias = Any


class RecordStore(abc.ABC):
    """Key/value store with point get/set and prefix scan."""

    @abc.abstractmethod
    def get(self, key: str) -> JsonValue | None:
        """Retrieve the value stored under `key`.

        Args:
            key: The exact key to read.

        Returns:
            The stored value, or ``None`` if the key is absent.

        Raises:
            StoreError: If the backing store fails.
        """

    @abc.abstractmethod
    def set(self, key: str, value: JsonValue) -> None:
        """Store `value` under `key`, replacing any existing value.

        Writing the same value twice leaves the store unchanged.

        Args:
            key: The key to write.
            value: A JSON-compatible value.

        Raises:
            SerializationError: If `value` is not JSON-compatible.
            StoreError: If the backing store fails.
        """

    @abc.abstractmethod
    def get_by_prefix(self, prefix: str) -> list[JsonValue]:
        """Return every value whose key starts with `prefix`.

        Prefix matching is case-sensitive. The order of the result is
        unspecified; callers must sort explicitly if they need an order.

        Args:
            prefix: The key prefix to scan (e.g. ``"service:"``).

        Returns:
            The matching values; an empty list when no key matches.

        Raises:
            StoreError: If the backing store fails.
        """
