"""Wire record stores, repositories and the catalogue service together."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from govcat import config
from govcat.adapters.db.engine import make_engine
from govcat.adapters.id_generators import ULIDGenerator
from govcat.adapters.record_store import SqlAlchemyRecordStore
from govcat.domain.utils import utc_now_ms
from govcat.interfaces.id_generator import IdGenerator
from govcat.interfaces.record_store import RecordStore
from govcat.service_layer.catalogue import CatalogueService
from govcat.service_layer.repository import CatalogueRepository
from govcat.service_layer.seed_data import DEFAULT_SERVICES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired application objects."""

    store: RecordStore
    catalogue: CatalogueService


def build_record_store(url: str) -> SqlAlchemyRecordStore:
    """Build a SQL record store for the database at `url`.

    The database must already be migrated (``govcat db upgrade``).
    """
    return SqlAlchemyRecordStore(make_engine(url))


def build_catalogue(
    store: RecordStore,
    *,
    id_generator: IdGenerator | None = None,
    clock: Callable[[], datetime] | None = None,
    strict: bool = False,
) -> CatalogueService:
    """Build a catalogue service over `store`.

    Args:
        store: The record store holding the catalogue.
        id_generator: Source of new service ids (ULIDs by default).
        clock: Current-time source (millisecond UTC wall clock by default).
        strict: Fail on malformed stored records instead of skipping them.
    """
    return CatalogueService(
        CatalogueRepository(store, strict=strict),
        id_generator if id_generator is not None else ULIDGenerator(),
        clock if clock is not None else utc_now_ms,
    )


def initialize(
    store: RecordStore,
    defaults: Sequence[Mapping[str, Any]] = DEFAULT_SERVICES,
    *,
    id_generator: IdGenerator | None = None,
    clock: Callable[[], datetime] | None = None,
) -> int:
    """Seed an empty catalogue with `defaults`; a no-op once data exists.

    Meant to be invoked once by deployment tooling (``govcat services seed``),
    never as an import side effect. Two processes initializing the same cold
    store at the same moment can both seed.

    Returns:
        The number of records written.
    """
    repository = CatalogueRepository(store)
    return repository.seed_if_empty(
        defaults,
        id_generator if id_generator is not None else ULIDGenerator(),
        clock if clock is not None else utc_now_ms,
    )


def bootstrap(url: str | None = None, *, strict: bool | None = None) -> AppContainer:
    """Build the application for the configured database.

    Args:
        url: Database URL; read from ``GOVCAT_DB_URL`` when omitted.
        strict: Strict record loading; read from ``GOVCAT_STRICT_LOAD`` when
            omitted.

    Raises:
        DatabaseUrlNotSetError: If no URL is given and none is configured.
    """
    url = url if url is not None else config.get_db_url()
    strict = strict if strict is not None else config.get_strict_load()
    store = build_record_store(url)
    logger.debug(
        "Bootstrapped catalogue (backend=%s, strict=%s)", store.dialect.value, strict
    )
    return AppContainer(store=store, catalogue=build_catalogue(store, strict=strict))
