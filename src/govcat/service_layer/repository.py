"""Catalogue repository: service records on top of a RecordStore."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime
from typing import Any

from govcat.domain.service_record import ServiceRecord, build_service_record
from govcat.interfaces.id_generator import IdGenerator
from govcat.interfaces.record_store import RecordStore

from .errors import MalformedRecordError
from .record_mapper import KEY_PREFIX, ServiceRecordMapper, service_key

logger = logging.getLogger(__name__)


class CatalogueRepository:
    """Loads and saves service records using the ``service:<id>`` key scheme.

    This is a thin wrapper around a record store: every call maps to a single
    store operation plus encoding/decoding.

    Args:
        store: The record store holding the catalogue.
        mapper: Entry/record converter; a default `ServiceRecordMapper` is used
            when omitted.
        strict: When False (the default), `load_all` skips malformed entries
            with a warning so one bad entry cannot hide the rest of the
            catalogue. When True, the first malformed entry raises.
    """

    def __init__(
        self,
        store: RecordStore,
        mapper: ServiceRecordMapper | None = None,
        *,
        strict: bool = False,
    ) -> None:
        self.store = store
        self.mapper = mapper if mapper is not None else ServiceRecordMapper()
        self.strict = strict

    # --- Loads ---

    def load_all(self) -> list[ServiceRecord]:
        """Load every service record, in no particular order.

        Raises:
            MalformedRecordError: Only in strict mode.
            StoreError: If the store fails.
        """
        records = []
        for entry in self.store.get_by_prefix(KEY_PREFIX):
            try:
                records.append(self.mapper.to_record(entry))
            except MalformedRecordError as e:
                if self.strict:
                    raise
                logger.warning("Skipping %s", e)
        return records

    def load_by_id(self, service_id: str) -> ServiceRecord | None:
        """Load one service record.

        Returns:
            The record, or None if no entry exists under ``service:<id>``.

        Raises:
            MalformedRecordError: If the entry exists but cannot be decoded.
            StoreError: If the store fails.
        """
        key = service_key(service_id)
        if (entry := self.store.get(key)) is None:
            return None
        return self.mapper.to_record(entry, key=key)

    # --- Saves ---

    def save(self, record: ServiceRecord) -> None:
        """Write a record under its key, replacing any previous entry."""
        self.store.set(service_key(record.id), self.mapper.to_entry(record))

    def seed_if_empty(
        self,
        defaults: Sequence[Mapping[str, Any]],
        id_generator: IdGenerator,
        clock: Callable[[], datetime],
    ) -> int:
        """Write `defaults` as new records if the catalogue holds none.

        Each default gets a freshly generated id and timestamp. Calling this
        on a populated catalogue is a no-op, so it is safe on every startup.
        It is not safe to run concurrently against a cold store: two callers
        can both see it empty and both seed.

        Returns:
            The number of records written (0 if the catalogue was not empty).

        Raises:
            ValidationError: If a default lacks a required field.
        """
        if self.load_all():
            logger.debug("Catalogue already populated; skipping seed")
            return 0

        logger.info("Initializing catalogue with %d sample services...", len(defaults))
        for fields in defaults:
            record = build_service_record(
                fields, new_id=id_generator.new_id, clock=clock
            )
            self.save(record)
        logger.info("Sample data initialized successfully")
        return len(defaults)
