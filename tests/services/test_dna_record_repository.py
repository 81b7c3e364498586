"""DNA Record Repository — SQL lookups, idempotent insert, and aggregate counts.

Invariants:
    - The unique fingerprint constraint turns a duplicate insert into RecordConflictError
    - The session stays usable after a conflict (rolled back, not poisoned)
    - MutantService over the SQL repository resolves an insert race to the stored row
    - An unreachable store surfaces as StoreUnavailableError even on a bare session
"""

import pytest
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker

from mutant_api.core.errors import RecordConflictError, StoreUnavailableError
from mutant_api.core.fingerprint import fingerprint_dna
from mutant_api.infrastructure.dna_record_repository import SqlDnaRecordRepository
from mutant_api.models.dna_record import DnaRecord
from mutant_api.services.keyed_lock import KeyedLock
from mutant_api.services.mutant_service import MutantService


async def _row_count(db) -> int:
    result = await db.execute(select(func.count()).select_from(DnaRecord))
    return result.scalar_one()


async def test_lookup_missing_returns_none(repository):
    assert await repository.get_by_fingerprint("0" * 64) is None


async def test_insert_then_lookup(repository):
    fp = "a" * 64
    inserted = await repository.insert(fp, True)
    found = await repository.get_by_fingerprint(fp)

    assert found is not None
    assert found.fingerprint == fp
    assert found.is_mutant is True
    assert found.created_at is not None
    assert found.id == inserted.id


async def test_duplicate_insert_raises_conflict(repository, test_db):
    fp = "b" * 64
    await repository.insert(fp, False)

    with pytest.raises(RecordConflictError) as exc_info:
        await repository.insert(fp, True)

    assert exc_info.value.fingerprint == fp
    assert await _row_count(test_db) == 1
    stored = await repository.get_by_fingerprint(fp)
    assert stored.is_mutant is False


async def test_count_by_verdict(repository):
    for i in range(3):
        await repository.insert(f"{i:064d}", True)
    for i in range(3, 8):
        await repository.insert(f"{i:064d}", False)

    assert await repository.count_by_verdict(True) == 3
    assert await repository.count_by_verdict(False) == 5


async def test_count_on_empty_table_is_zero(repository):
    assert await repository.count_by_verdict(True) == 0
    assert await repository.count_by_verdict(False) == 0


async def test_service_persists_one_row_for_repeated_dna(test_db, mutant_dna):
    service = MutantService(SqlDnaRecordRepository(test_db), locks=KeyedLock())

    assert await service.process_dna(mutant_dna) is True
    assert await service.process_dna(mutant_dna) is True
    assert await _row_count(test_db) == 1


class _StaleReadRepository(SqlDnaRecordRepository):
    """Misses the first lookups, as if another process inserted right after."""

    def __init__(self, db, stale_reads: int):
        super().__init__(db)
        self.stale_reads = stale_reads

    async def get_by_fingerprint(self, fingerprint):
        if self.stale_reads:
            self.stale_reads -= 1
            return None
        return await super().get_by_fingerprint(fingerprint)


async def test_service_resolves_unique_constraint_race(test_db, mutant_dna):
    winner = SqlDnaRecordRepository(test_db)
    await winner.insert(fingerprint_dna(mutant_dna), False)

    loser = _StaleReadRepository(test_db, stale_reads=2)
    result = await MutantService(loser, locks=KeyedLock()).process_dna(mutant_dna)

    assert result is False
    assert await _row_count(test_db) == 1


# -- Store unreachable ----------------------------------------------------------------

@pytest.fixture
async def unreachable_db():
    """A session opened directly on a store that cannot be connected to."""
    engine = create_async_engine("sqlite+aiosqlite:////nonexistent-dir/db.sqlite")
    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session
    await engine.dispose()


async def test_lookup_on_unreachable_store(unreachable_db):
    repo = SqlDnaRecordRepository(unreachable_db)
    with pytest.raises(StoreUnavailableError) as exc_info:
        await repo.get_by_fingerprint("0" * 64)
    assert exc_info.value.operation == "lookup"
    assert exc_info.value.http_status == 503


async def test_insert_on_unreachable_store(unreachable_db):
    repo = SqlDnaRecordRepository(unreachable_db)
    with pytest.raises(StoreUnavailableError) as exc_info:
        await repo.insert("0" * 64, True)
    assert exc_info.value.operation == "commit"


async def test_count_on_unreachable_store(unreachable_db):
    repo = SqlDnaRecordRepository(unreachable_db)
    with pytest.raises(StoreUnavailableError) as exc_info:
        await repo.count_by_verdict(True)
    assert exc_info.value.operation == "count"


async def test_service_on_unreachable_store_raises_store_unavailable(
    unreachable_db, mutant_dna,
):
    service = MutantService(SqlDnaRecordRepository(unreachable_db), locks=KeyedLock())
    with pytest.raises(StoreUnavailableError):
        await service.process_dna(mutant_dna)
