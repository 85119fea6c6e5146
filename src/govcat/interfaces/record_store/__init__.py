"""GOVCAT Record Store Interface Package"""

from .errors import SerializationError, StoreError, StoreUnavailableError
from .record_store import JsonValue, RecordStore

__all__ = [
    "JsonValue",
    "RecordStore",
    "SerializationError",
    "StoreError",
    "StoreUnavailableError",
]
