"""create kv_store table

Revision ID: 5c2e8a41f0d3
Revises:
Create Date: 2026-10-19 09:12:44.518207

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "5c2e8a41f0d3"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "kv_store",
        sa.Column(
            "key",
            sa.String(length=512),
            nullable=False,
            comment="Namespaced record key, e.g. 'service:<id>'.",
        ),
        sa.Column(
            "value",
            sa.JSON(none_as_null=True).with_variant(
                postgresql.JSONB(none_as_null=True), "postgresql"
            ),
            nullable=False,
            comment="Serialized record (JSON object).",
        ),
        sa.PrimaryKeyConstraint("key", name=op.f("pk_kv_store")),
        comment="Key/value record store. One row per record.",
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("kv_store")
