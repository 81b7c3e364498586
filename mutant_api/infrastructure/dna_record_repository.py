"""DNA Record Repository — SQLAlchemy implementation of DnaRecordRepository.

Invariants:
    - insert never overwrites: a duplicate fingerprint rolls back and raises
      RecordConflictError (the unique constraint is the cross-process guard)
    - Counts are aggregate queries over dna_records, never cached in memory
    - Driver and connectivity errors leave as StoreUnavailableError, whoever
      owns the session (get_db or a direct caller)

Design Decisions:
    - Commit per insert: a classification is durable before its verdict is returned
    - IntegrityError is caught before DBAPIError (it is a subclass)
"""

import logging

from sqlalchemy import select, func
from sqlalchemy.exc import DBAPIError, IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from mutant_api.core.domain_types import DnaFingerprint
from mutant_api.core.errors import (
    ErrorContext, RecordConflictError, StoreUnavailableError,
)
from mutant_api.models.dna_record import DnaRecord

logger = logging.getLogger(__name__)


def _store_unavailable(
    error: DBAPIError, operation: str, fingerprint: str | None = None,
) -> StoreUnavailableError:
    logger.error(f"DB {operation} failed: {error}")
    return StoreUnavailableError(
        type(error).__name__, operation, ErrorContext(fingerprint=fingerprint),
    )


class SqlDnaRecordRepository:
    """DnaRecordRepository backed by the dna_records table."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_fingerprint(
        self, fingerprint: DnaFingerprint,
    ) -> DnaRecord | None:
        try:
            result = await self.db.execute(
                select(DnaRecord).where(DnaRecord.fingerprint == fingerprint),
            )
        except DBAPIError as e:
            raise _store_unavailable(e, "lookup", fingerprint) from e
        return result.scalar_one_or_none()

    async def insert(
        self, fingerprint: DnaFingerprint, is_mutant: bool,
    ) -> DnaRecord:
        record = DnaRecord(fingerprint=fingerprint, is_mutant=is_mutant)
        self.db.add(record)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.warning(
                "Duplicate DNA fingerprint on insert",
                extra={"fingerprint": fingerprint},
            )
            raise RecordConflictError(fingerprint)
        except DBAPIError as e:
            raise _store_unavailable(e, "commit", fingerprint) from e
        return record

    async def count_by_verdict(self, is_mutant: bool) -> int:
        try:
            result = await self.db.execute(
                select(func.count())
                .select_from(DnaRecord)
                .where(DnaRecord.is_mutant.is_(is_mutant)),
            )
        except DBAPIError as e:
            raise _store_unavailable(e, "count") from e
        return result.scalar_one()
