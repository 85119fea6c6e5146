"""Domain-layer error definitions."""

from __future__ import annotations

from collections.abc import Iterable


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ValidationError(DomainError):
    """Raised when a new service record is missing one or more required fields.

    Attributes:
        missing_fields (tuple[str, ...]): Names of the missing or empty fields,
            in the order they are declared on the record.
    """

    def __init__(self, missing_fields: Iterable[str]) -> None:
        self.missing_fields = tuple(missing_fields)
        super().__init__(
            f"Missing required fields: {', '.join(self.missing_fields)}"
        )
