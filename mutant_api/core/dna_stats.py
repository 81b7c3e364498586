"""DNA Stats — pure computation of the verification summary from two counts.

Invariants:
    - No IO, no DB: counts come from the record store via StatsService
    - ratio = mutants / humans, and 0.0 when there are no humans (never raises)
    - Returns a flat dict with the public JSON field names
"""


def compute_ratio(mutant_count: int, human_count: int) -> float:
    """Mutant-to-human ratio with an explicit zero-human guard."""
    if human_count == 0:
        return 0.0
    return mutant_count / human_count


def compute_dna_stats(mutant_count: int, human_count: int) -> dict:
    """Build the /stats payload. Pure, no IO."""
    return {
        "count_mutant_dna": mutant_count,
        "count_human_dna": human_count,
        "ratio": compute_ratio(mutant_count, human_count),
    }
