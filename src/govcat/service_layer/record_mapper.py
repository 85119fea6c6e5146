"""Conversions between ServiceRecords and record-store entries.

A service record is stored under ``service:<id>`` as a JSON object whose
field names are a boundary contract shared with the transport layer:

    {"id", "name", "description", "owner", "tags", "docs_link", "created_at"}

``created_at`` is written as ISO-8601 UTC with millisecond precision.
"""

from __future__ import annotations

from typing import Any

from govcat.domain.service_record import ServiceRecord
from govcat.domain.utils import format_timestamp, parse_timestamp
from govcat.interfaces.record_store import JsonValue

from .errors import MalformedRecordError

KEY_PREFIX = "service:"  # pragma: no mutate

UNKNOWN_KEY = "<unknown>"  # pragma: no mutate


def service_key(service_id: str) -> str:
    """Return the store key for a service id."""
    return f"{KEY_PREFIX}{service_id}"


class ServiceRecordMapper:
    """Maps between ServiceRecords and their serialized store entries."""

    TEXT_FIELDS = ("id", "name", "description", "owner", "docs_link")

    @staticmethod
    def to_entry(record: ServiceRecord) -> dict[str, Any]:
        """Convert a ServiceRecord to its serialized shape."""
        return {
            "id": record.id,
            "name": record.name,
            "description": record.description,
            "owner": record.owner,
            "tags": list(record.tags),
            "docs_link": record.docs_link,
            "created_at": format_timestamp(record.created_at),
        }

    def to_record(self, entry: JsonValue, key: str | None = None) -> ServiceRecord:
        """Convert a serialized entry back to a ServiceRecord.

        Args:
            entry: The value read from the store.
            key: The store key, if known; used only in error messages.

        Raises:
            MalformedRecordError: If a field is missing, has the wrong type, or
                the timestamp cannot be parsed. A missing ``tags`` field reads
                as no tags.
        """
        if not isinstance(entry, dict):
            raise MalformedRecordError(
                key or UNKNOWN_KEY, f"expected an object, got {type(entry).__name__}"
            )
        if key is None:
            entry_id = entry.get("id")
            key = service_key(entry_id) if isinstance(entry_id, str) else UNKNOWN_KEY

        for field in self.TEXT_FIELDS:
            if not isinstance(entry.get(field), str):
                raise MalformedRecordError(key, f"'{field}' must be a string")

        tags = entry.get("tags", [])
        if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
            raise MalformedRecordError(key, "'tags' must be a list of strings")

        created_at = entry.get("created_at")
        if not isinstance(created_at, str):
            raise MalformedRecordError(key, "'created_at' must be a string")
        try:
            timestamp = parse_timestamp(created_at)
        except ValueError as e:
            raise MalformedRecordError(
                key, f"'created_at' is not an ISO-8601 timestamp: {created_at!r}"
            ) from e

        return ServiceRecord(
            id=entry["id"],
            name=entry["name"],
            description=entry["description"],
            owner=entry["owner"],
            docs_link=entry["docs_link"],
            created_at=timestamp,
            tags=tuple(tags),
        )
