"""Mutant Detection — single-pass scan for runs of four identical bases.

Invariants:
    - Input is a validated DnaGrid (never raises InvalidDnaError)
    - Cells visited in row-major order; at each cell directions checked in the order
      horizontal, vertical, diagonal-down, diagonal-up
    - Every qualifying 4-base window counts once, so a run of 5 counts twice
    - Mutant means strictly more than one window; the scan stops at the second

Design Decisions:
    - iter_sequences is a generator: is_mutant pulls only as many matches as it needs,
      so early termination is a property of the scan itself
    - Boundary gates evaluated before the window comparison: no index ever leaves the grid
"""

from collections.abc import Iterator
from itertools import islice

from mutant_api.core.domain_types import (
    Direction, DnaGrid, MUTANT_THRESHOLD, SEQUENCE_LENGTH, SequenceMatch,
)


def is_mutant(grid: DnaGrid) -> bool:
    """True when the grid holds more than one qualifying window."""
    found = sum(1 for _ in islice(iter_sequences(grid), MUTANT_THRESHOLD))
    return found >= MUTANT_THRESHOLD


def iter_sequences(grid: DnaGrid) -> Iterator[SequenceMatch]:
    """Yield every qualifying window lazily, in scan order."""
    n = len(grid)
    last_start = n - SEQUENCE_LENGTH
    for row in range(n):
        for col in range(n):
            fits_right = col <= last_start
            fits_down = row <= last_start
            if fits_right and _window_matches(grid, row, col, Direction.HORIZONTAL):
                yield SequenceMatch(row, col, Direction.HORIZONTAL)
            if fits_down and _window_matches(grid, row, col, Direction.VERTICAL):
                yield SequenceMatch(row, col, Direction.VERTICAL)
            if (
                fits_down and fits_right
                and _window_matches(grid, row, col, Direction.DIAGONAL_DOWN)
            ):
                yield SequenceMatch(row, col, Direction.DIAGONAL_DOWN)
            if (
                row >= SEQUENCE_LENGTH - 1 and fits_right
                and _window_matches(grid, row, col, Direction.DIAGONAL_UP)
            ):
                yield SequenceMatch(row, col, Direction.DIAGONAL_UP)


def _window_matches(
    grid: DnaGrid, row: int, col: int, direction: Direction,
) -> bool:
    d_row, d_col = direction.step
    base = grid[row][col]
    return all(
        grid[row + k * d_row][col + k * d_col] == base
        for k in range(1, SEQUENCE_LENGTH)
    )
