"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, the SQL repository and test doubles
      satisfy it without a shared base class
    - insert is insert-if-absent: a duplicate fingerprint raises RecordConflictError
      instead of overwriting
    - Implementations raise StoreUnavailableError for store failures, never
      driver exceptions, so services work with or without a session manager
"""

from datetime import datetime
from typing import Protocol

from mutant_api.core.domain_types import DnaFingerprint


class DnaRecordLike(Protocol):
    """Structural contract for a persisted classification record."""
    fingerprint: str
    is_mutant: bool
    created_at: datetime


class DnaRecordRepository(Protocol):
    """Contract for classification record persistence — implemented by shell."""
    async def get_by_fingerprint(
        self, fingerprint: DnaFingerprint,
    ) -> DnaRecordLike | None: ...
    async def insert(
        self, fingerprint: DnaFingerprint, is_mutant: bool,
    ) -> DnaRecordLike: ...
    async def count_by_verdict(self, is_mutant: bool) -> int: ...
