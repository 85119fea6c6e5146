"""Record store schema.

Defines the ``kv_store`` table backing `SqlAlchemyRecordStore`. Each row maps
one namespaced key (e.g. ``service:01J...``) to a JSON document.

| Column | Type                         | Notes                              |
|--------|------------------------------|------------------------------------|
| key    | VARCHAR(512), primary key    | namespace prefix + identifier      |
| value  | JSONB (Postgres) / JSON      | serialized record, never NULL      |

The schema itself is created by the Alembic migration ``create_kv_store``.
"""

from __future__ import annotations

from sqlalchemy import Column, String, Table

from govcat.adapters.db.metadata import metadata
from govcat.adapters.db.sa_types import PORTABLE_JSON

__all__ = ["kv_store"]

KEY_MAX_LENGTH = 512

kv_store = Table(
    "kv_store",
    metadata,
    Column(
        "key",
        String(KEY_MAX_LENGTH),
        primary_key=True,
        comment="Namespaced record key, e.g. 'service:<id>'.",
    ),
    Column(
        "value",
        PORTABLE_JSON,
        nullable=False,
        comment="Serialized record (JSON object).",
    ),
    comment="Key/value record store. One row per record.",
)
