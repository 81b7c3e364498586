"""DNA records — one row per classified DNA fingerprint.

Revision ID: 001_dna_records
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_dna_records"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "dna_records",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("fingerprint", sa.String(64), nullable=False),
        sa.Column("is_mutant", sa.Boolean, nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
    )
    op.create_index(
        "ix_dna_records_fingerprint", "dna_records", ["fingerprint"],
        unique=True,
    )
    op.create_index("ix_dna_records_is_mutant", "dna_records", ["is_mutant"])


def downgrade() -> None:
    op.drop_index("ix_dna_records_is_mutant", table_name="dna_records")
    op.drop_index("ix_dna_records_fingerprint", table_name="dna_records")
    op.drop_table("dna_records")
