"""Record store adapters."""

from .memory import InMemoryRecordStore
from .sqlalchemy_store import SqlAlchemyRecordStore

__all__ = ["InMemoryRecordStore", "SqlAlchemyRecordStore"]
