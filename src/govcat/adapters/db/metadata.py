"""The `MetaData` every GOVCAT table is declared on.

Constraint names are derived from `NAMING_CONVENTION` instead of being left
to the backend, so PostgreSQL and SQLite agree on them and Alembic can refer
to them by name in later migrations.
"""

from sqlalchemy import MetaData

NAMING_CONVENTION = {
    "pk": "pk_%(table_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ix": "ix_%(table_name)s_%(column_0_N_label)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
}

metadata = MetaData(naming_convention=NAMING_CONVENTION)
