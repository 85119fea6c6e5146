"""Exceptions for record store operations."""


class StoreError(Exception):
    """Base class for record store errors.

    Raised for storage-level failures only; a missing key is never an error.
    """


class StoreUnavailableError(StoreError):
    """The backing store could not be reached or rejected the operation.

    Attributes:
        operation (str): The store operation that failed (e.g. "get").
        key (str): The key or prefix the operation targeted.
    """

    def __init__(self, operation: str, key: str, reason: str) -> None:
        super().__init__(f"Record store {operation}({key!r}) failed: {reason}")
        self.operation = operation
        self.key = key


class SerializationError(StoreError):
    """A value could not be serialized for, or deserialized from, the store.

    Attributes:
        key (str): The key whose value could not be (de)serialized.
    """

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Value at {key!r} could not be serialized: {reason}")
        self.key = key
