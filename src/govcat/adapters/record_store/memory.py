"""In-memory record store backend.

Keeps every value as a JSON string in a dict, so it behaves like a real
serializing backend: values that cannot be encoded are rejected on `set`, and
callers never share mutable objects with the store. Intended for tests, demos,
and local development; nothing persists across process restarts.
"""

from __future__ import annotations

import json
import logging
import threading

from govcat.interfaces.record_store import JsonValue, RecordStore, SerializationError

__all__ = ["InMemoryRecordStore"]

logger = logging.getLogger(__name__)


class InMemoryRecordStore(RecordStore):
    """RecordStore backed by a dict of JSON-encoded values.

    All reads and writes happen under a reentrant lock, so `get`/`set` on a
    key are atomic with respect to other operations. `get_by_prefix` takes a
    consistent snapshot of the matching entries.
    """

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def get(self, key: str) -> JsonValue | None:
        with self._lock:
            encoded = self._entries.get(key)
        if encoded is None:
            return None
        return json.loads(encoded)

    def set(self, key: str, value: JsonValue) -> None:
        if value is None:
            raise SerializationError(key, "None cannot be stored")
        try:
            encoded = json.dumps(value, allow_nan=False)
        except (TypeError, ValueError) as e:
            logger.error("Cannot serialize value for %s: %s", key, e)
            raise SerializationError(key, str(e)) from e
        with self._lock:
            self._entries[key] = encoded
        logger.debug("Stored %s (%d bytes)", key, len(encoded))

    def get_by_prefix(self, prefix: str) -> list[JsonValue]:
        with self._lock:
            matches = [
                encoded
                for key, encoded in self._entries.items()
                if key.startswith(prefix)
            ]
        return [json.loads(encoded) for encoded in matches]
