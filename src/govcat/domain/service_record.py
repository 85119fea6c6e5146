"""Service record model for the catalogue."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

from .errors import ValidationError

#: Text fields that must be present and non-blank when a record is created.
REQUIRED_FIELDS = ("name", "description", "owner", "docs_link")


@dataclass(frozen=True, slots=True)
class ServiceRecord:
    """Immutable catalogue entry describing one government service.

    Conventions:
      - `id` is opaque and assigned at creation; it never changes.
      - `tags` keep the caller's order and casing; duplicates are allowed.
      - `created_at` is a UTC tz-aware datetime assigned at creation and is
        used only for newest-first ordering.
    """

    id: str
    name: str
    description: str
    owner: str
    docs_link: str
    created_at: datetime
    tags: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))
        if self.created_at.tzinfo is None or self.created_at.utcoffset() != timedelta(
            0
        ):
            raise ValueError(f"created_at of service {self.id} must be tz-aware UTC")


def find_missing_fields(fields: Mapping[str, Any]) -> list[str]:
    """Return the required fields that are absent, not strings, or blank."""
    missing = []
    for name in REQUIRED_FIELDS:
        value = fields.get(name)
        if not isinstance(value, str) or not value.strip():
            missing.append(name)
    return missing


def validate_new_service(fields: Mapping[str, Any]) -> None:
    """Check the caller-supplied fields of a service about to be created.

    Raises:
        ValidationError: If any of `name`, `description`, `owner` or
            `docs_link` is missing or empty.
    """
    if missing := find_missing_fields(fields):
        raise ValidationError(missing)


def normalize_tags(value: Any) -> tuple[str, ...]:
    """Coerce a caller-supplied tags value to a tuple of strings.

    Lists and tuples are kept in order (non-string items are dropped); any
    other value, including ``None`` and bare strings, yields an empty tuple.
    """
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(tag for tag in value if isinstance(tag, str))


def build_service_record(
    fields: Mapping[str, Any],
    *,
    new_id: Callable[[], str],
    clock: Callable[[], datetime],
) -> ServiceRecord:
    """Validate caller-supplied fields and create a brand-new record from them.

    `new_id` and `clock` are only called once the fields are valid.

    Args:
        fields: Raw fields (``name``, ``description``, ``owner``,
            ``docs_link`` and optionally ``tags``); any other key is ignored.
        new_id: Returns the identifier of the new record.
        clock: Returns the creation timestamp (tz-aware UTC).

    Raises:
        ValidationError: If a required field is missing or empty.
    """
    validate_new_service(fields)
    return ServiceRecord(
        id=new_id(),
        name=fields["name"],
        description=fields["description"],
        owner=fields["owner"],
        docs_link=fields["docs_link"],
        created_at=clock(),
        tags=normalize_tags(fields.get("tags")),
    )
