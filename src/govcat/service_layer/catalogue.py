"""Catalogue service facade.

Composes the `CatalogueRepository` with the pure query engine in
`govcat.domain.query` to answer the catalogue use-cases:

| operation   | result                                            |
|-------------|---------------------------------------------------|
| `list_all`  | every record, newest first                        |
| `search`    | text + tag filtered records, newest first         |
| `get_by_id` | the record, or None when it does not exist        |
| `related`   | up to 6 records ranked by shared tags             |
| `create`    | the stored record, or `ValidationError`           |

Reads load the whole ``service:`` keyspace and filter in memory; the store's
scan order is never relied upon.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import Any

from govcat.domain import query
from govcat.domain.service_record import ServiceRecord, build_service_record
from govcat.domain.utils import utc_now_ms
from govcat.interfaces.id_generator import IdGenerator

from .repository import CatalogueRepository

logger = logging.getLogger(__name__)


class CatalogueService:
    """Entry point to the catalogue for entrypoints (CLI, HTTP, jobs).

    Args:
        repository: Repository holding the service records.
        id_generator: Source of new service ids.
        clock: Returns the current UTC time; defaults to millisecond-precision
            wall-clock time.
    """

    def __init__(
        self,
        repository: CatalogueRepository,
        id_generator: IdGenerator,
        clock: Callable[[], datetime] = utc_now_ms,
    ) -> None:
        self.repository = repository
        self.id_generator = id_generator
        self.clock = clock

    # --- Queries ---

    def list_all(self) -> list[ServiceRecord]:
        """Return every service, newest first."""
        records = query.newest_first(self.repository.load_all())
        logger.debug("Listing %d services", len(records))
        return records

    def search(self, text: str = "", tags: Iterable[str] = ()) -> list[ServiceRecord]:
        """Return services matching `text` and any of `tags`, newest first.

        Args:
            text: Case-insensitive substring of name, description or owner.
                Blank text matches everything.
            tags: Case-insensitive substrings of the record's tags; a record
                matches if any of its tags contains any of these. No tags
                matches everything.
        """
        tags = list(tags)
        matches = query.search(self.repository.load_all(), text, tags)
        logger.debug("Search text=%r tags=%r matched %d", text, tags, len(matches))
        return query.newest_first(matches)

    def get_by_id(self, service_id: str) -> ServiceRecord | None:
        """Return the service with `service_id`, or None if there is none."""
        record = self.repository.load_by_id(service_id)
        if record is None:
            logger.debug("Service %s not found", service_id)
        return record

    def related(
        self, tags: Iterable[str], exclude_id: str | None = None
    ) -> list[ServiceRecord]:
        """Return up to six services sharing tags with `tags`.

        Tags are compared by exact case-insensitive equality. Services are
        ranked by the number of distinct tags shared; equal scores are listed
        newest first. `exclude_id` (typically the service being viewed) never
        appears in the result.
        """
        tags = list(tags)
        if not any(tag.strip() for tag in tags):
            return []
        candidates = query.newest_first(self.repository.load_all())
        ranked = query.related(candidates, tags, exclude_id)
        logger.debug(
            "Related to tags=%r (excluding %s): %d", tags, exclude_id, len(ranked)
        )
        return ranked

    # --- Commands ---

    def create(self, fields: Mapping[str, Any]) -> ServiceRecord:
        """Validate and store a new service.

        Args:
            fields: ``name``, ``description``, ``owner`` and ``docs_link``
                (required, non-empty strings) and optionally ``tags``. A
                missing or non-list ``tags`` value is stored as no tags.

        Returns:
            The stored record, with its generated id and creation time.

        Raises:
            ValidationError: If required fields are missing; nothing is written.
            StoreError: If the store fails.
        """
        record = build_service_record(
            fields, new_id=self.id_generator.new_id, clock=self.clock
        )
        self.repository.save(record)
        logger.info("Created service %s (%s)", record.id, record.name)
        return record
