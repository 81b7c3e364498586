"""Mutant Service — validate, fingerprint, then lookup-or-classify against the record store.

Invariants:
    - Validation runs before any fingerprinting, store access or scan work
    - A stored verdict is returned unchanged: identical DNA is never scanned twice
    - At most one record per fingerprint, even under concurrent requests:
        * in process, misses for the same fingerprint are serialized by KeyedLock and
          the lock holder re-reads the store before scanning
        * across processes, a RecordConflictError on insert is absorbed by
          re-reading the winner's record
    - StoreUnavailableError propagates untouched; nothing is retried here

Design Decisions:
    - Detector injected as a plain callable: tests count invocations without patching
    - Hits skip the lock entirely, so reads of a resolved record never block
"""

import logging
from collections.abc import Callable, Sequence

from mutant_api.core.detect_mutant import is_mutant
from mutant_api.core.domain_types import DnaFingerprint, DnaGrid
from mutant_api.core.errors import (
    ErrorContext, RecordConflictError, StoreUnavailableError,
)
from mutant_api.core.fingerprint import fingerprint_dna
from mutant_api.core.repository_protocols import DnaRecordRepository
from mutant_api.core.validate_dna import validate_dna
from mutant_api.services.keyed_lock import KeyedLock

logger = logging.getLogger(__name__)

# Shared by every MutantService in this process (one per request)
_classification_locks = KeyedLock()


class MutantService:
    """Classification cache in front of the mutant detector."""

    def __init__(
        self,
        repository: DnaRecordRepository,
        detector: Callable[[DnaGrid], bool] = is_mutant,
        locks: KeyedLock | None = None,
    ):
        self.repository = repository
        self.detector = detector
        self.locks = locks if locks is not None else _classification_locks

    async def process_dna(self, dna: Sequence[str | None] | None) -> bool:
        """Validate raw rows, then classify through the cache."""
        grid = validate_dna(dna)
        return await self.classify_with_cache(grid)

    async def classify_with_cache(self, grid: DnaGrid) -> bool:
        fingerprint = fingerprint_dna(grid)
        cached = await self._lookup(fingerprint)
        if cached is not None:
            return cached

        async with self.locks.hold(fingerprint):
            # Another request may have stored it while we waited
            cached = await self._lookup(fingerprint)
            if cached is not None:
                return cached
            return await self._classify_and_store(fingerprint, grid)

    async def _lookup(self, fingerprint: DnaFingerprint) -> bool | None:
        record = await self.repository.get_by_fingerprint(fingerprint)
        if record is None:
            return None
        logger.info(
            "DNA cache hit",
            extra={
                "fingerprint": fingerprint,
                "is_mutant": record.is_mutant,
                "cache_hit": True,
            },
        )
        return record.is_mutant

    async def _classify_and_store(
        self, fingerprint: DnaFingerprint, grid: DnaGrid,
    ) -> bool:
        verdict = self.detector(grid)
        try:
            await self.repository.insert(fingerprint, verdict)
        except RecordConflictError:
            return await self._resolve_conflict(fingerprint)
        logger.info(
            "DNA classified",
            extra={
                "fingerprint": fingerprint,
                "is_mutant": verdict,
                "cache_hit": False,
            },
        )
        return verdict

    async def _resolve_conflict(self, fingerprint: DnaFingerprint) -> bool:
        """Another process inserted first — its record is the answer."""
        record = await self.repository.get_by_fingerprint(fingerprint)
        if record is None:
            raise StoreUnavailableError(
                "Conflicting record vanished after insert", "lookup",
                ErrorContext(fingerprint=fingerprint),
            )
        logger.info(
            "DNA insert lost race, using stored verdict",
            extra={"fingerprint": fingerprint, "is_mutant": record.is_mutant},
        )
        return record.is_mutant
