"""create resource_records table

Revision ID: 3f1c2a9d7b60
Revises:
Create Date: 2026-10-19 09:12:44.108311

"""

# pylint: disable=invalid-name

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# pylint: disable=no-member

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d7b60"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "resource_records",
        sa.Column(
            "kind",
            sa.String(length=64),
            nullable=False,
            comment="Resource type name (URL segment).",
        ),
        sa.Column(
            "record_id",
            sa.String(length=200),
            nullable=False,
            comment="Record identifier, unique within its kind.",
        ),
        sa.Column(
            "attributes",
            sa.JSON(none_as_null=True).with_variant(
                postgresql.JSONB(none_as_null=True), "postgresql"
            ),
            nullable=False,
            comment="Record attributes, including the id and foreign keys.",
        ),
        sa.CheckConstraint(
            "length(kind) > 0", name=op.f("ck_resource_records_kind_not_empty")
        ),
        sa.PrimaryKeyConstraint("kind", "record_id", name=op.f("pk_resource_records")),
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_table("resource_records")
