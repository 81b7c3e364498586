"""DnaRecord ORM — one row per distinct DNA grid ever classified.

Invariants:
    - fingerprint is unique: at most one record per grid, enforced by the database
    - Records are insert-only (never updated, never deleted by the service)
    - is_mutant indexed: /stats runs two count queries against it

Design Decisions:
    - The grid itself is not stored, only its SHA-256 fingerprint
    - created_at set client-side in UTC like every other timestamp in the service
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from mutant_api.db.base import Base


class DnaRecord(Base):
    """Classification result keyed by DNA fingerprint."""
    __tablename__ = "dna_records"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    fingerprint: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True, index=True,
    )
    is_mutant: Mapped[bool] = mapped_column(
        Boolean, nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
