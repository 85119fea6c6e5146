"""Concrete `IdGenerator`s for new catalogue services."""

import itertools
import threading
import uuid

from ulid import monotonic

from govcat.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class ULIDGenerator(IdGenerator):
    """Monotonic ULIDs, the production default.

    A ULID starts with its millisecond timestamp, so ids of services created
    later sort after earlier ones, even within the same millisecond.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            return str(monotonic.new())


class UUIDv4Generator(IdGenerator):
    """Random UUIDs in canonical hyphenated form; no ordering."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class SimpleIdGenerator(IdGenerator):
    """Readable sequential ids (``svc_0001``, ``svc_0002``...) for tests and demos.

    Args:
        prefix: Text placed before the sequence number.
        length: Zero-padded width of the sequence number.
    """

    def __init__(self, prefix: str = "svc_", length: int = 4) -> None:
        self.prefix = prefix
        self.length = length
        self._sequence = itertools.count(1)
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            number = next(self._sequence)
        return f"{self.prefix}{number:0{self.length}d}"
