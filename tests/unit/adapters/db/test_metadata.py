"""Tests for the constraint naming convention of `govcat.adapters.db.metadata`.

Tables are declared on a private `MetaData` sharing the convention, so the
shared catalogue metadata (and the migration drift check) stays untouched.
"""

from __future__ import annotations

import pytest
from sqlalchemy import (
    CheckConstraint,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    UniqueConstraint,
    create_engine,
    inspect,
)

from govcat.adapters.db.metadata import NAMING_CONVENTION, metadata
from govcat.adapters.record_store.schema import kv_store

# pylint: disable=magic-value-comparison,redefined-outer-name


@pytest.fixture
def scratch():
    """A throwaway in-memory database and a metadata with GOVCAT's convention."""
    engine = create_engine("sqlite:///:memory:")
    yield engine, MetaData(naming_convention=NAMING_CONVENTION)
    engine.dispose()


def test_kv_store_is_registered():
    assert metadata.tables["kv_store"] is kv_store
    assert kv_store.primary_key.name == "pk_kv_store"


def test_unnamed_indexes_are_named(scratch):
    engine, md = scratch
    Table(
        "owners",
        md,
        Column("id", Integer, primary_key=True),
        Column("name", String, nullable=False),
        Column("agency", String),
        Index(None, "name"),
        Index(None, "name", "agency"),
    )
    md.create_all(engine)

    names = {ix["name"] for ix in inspect(engine).get_indexes("owners")}
    assert "ix_owners_owners_name" in names
    assert "ix_owners_owners_name_owners_agency" in names


def test_unique_constraint_is_named(scratch):
    engine, md = scratch
    Table(
        "links",
        md,
        Column("id", Integer, primary_key=True),
        Column("url", String, nullable=False),
        UniqueConstraint("url"),
    )
    md.create_all(engine)

    inspector = inspect(engine)
    # SQLite may reflect UNIQUE as a unique index
    names = {uc.get("name") for uc in inspector.get_unique_constraints("links")}
    names |= {ix["name"] for ix in inspector.get_indexes("links")}
    assert "uq_links_url" in names


def test_check_constraint_gets_table_prefix(scratch):
    engine, md = scratch
    Table(
        "counts",
        md,
        Column("id", Integer, primary_key=True),
        Column("n", Integer),
        CheckConstraint("n >= 0", name="nonneg"),
    )
    md.create_all(engine)

    checks = inspect(engine).get_check_constraints("counts")
    assert "ck_counts_nonneg" in {c.get("name") for c in checks}
