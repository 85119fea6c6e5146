"""Portable SQLAlchemy column types for GOVCAT.

Record-store values are JSON documents. PostgreSQL stores them as ``JSONB``
(binary, indexable); SQLite falls back to SQLAlchemy's generic ``JSON`` type,
which keeps the serialized text.
"""

from sqlalchemy import JSON
from sqlalchemy.dialects.postgresql import JSONB

__all__ = ["PORTABLE_JSON"]

# none_as_null: a Python None value is stored as SQL NULL rather than JSON 'null'
PORTABLE_JSON = JSON(none_as_null=True).with_variant(
    JSONB(none_as_null=True), "postgresql"
)
