"""Stats Service — mutant/human counts read from the record store.

Invariants:
    - Counts come from aggregate queries (no in-memory counters to drift)
    - Ratio computed by core/dna_stats.py (zero-human guard lives there)
"""

from mutant_api.core.dna_stats import compute_dna_stats
from mutant_api.core.repository_protocols import DnaRecordRepository


class StatsService:
    """Read-only summary over persisted classifications."""

    def __init__(self, repository: DnaRecordRepository):
        self.repository = repository

    async def counts(self) -> tuple[int, int]:
        """Return (mutant_count, human_count)."""
        mutants = await self.repository.count_by_verdict(True)
        humans = await self.repository.count_by_verdict(False)
        return mutants, humans

    async def get_stats(self) -> dict:
        mutants, humans = await self.counts()
        return compute_dna_stats(mutants, humans)
