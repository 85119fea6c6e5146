"""Repository-related error definitions."""


class RepositoryError(Exception):
    """Base class for repository-related errors."""


class MalformedRecordError(RepositoryError):
    """Raised when a stored entry cannot be decoded into a service record.

    Attributes:
        key (str): The store key of the entry, or ``"<unknown>"`` when the
            entry was reached by a prefix scan and carries no usable id.
        reason (str): What was wrong with the entry.
    """

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"Malformed service record at {key}: {reason}")
        self.key = key
        self.reason = reason
