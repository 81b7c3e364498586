"""DNA Validation — the single structural gate every grid passes before analysis.

Invariants:
    - Checks run in a fixed order: empty, size, then per row (null, length, bases)
    - First violation wins; rows scanned top to bottom, bases left to right
    - Returns an immutable DnaGrid; never mutates the input

Design Decisions:
    - One validator instead of schema constraints plus detector checks: the request
      schema only types the body, the detector trusts its input
"""

from collections.abc import Sequence

from mutant_api.core.domain_types import DnaGrid, MIN_GRID_SIZE, VALID_BASES
from mutant_api.core.errors import ErrorContext, InvalidDnaError, InvalidDnaReason


def validate_dna(dna: Sequence[str | None] | None) -> DnaGrid:
    """Validate raw rows and return them as a DnaGrid. Pure, no IO."""
    if not dna:
        raise InvalidDnaError(
            "DNA must not be null or empty", InvalidDnaReason.EMPTY,
        )

    n = len(dna)
    if n < MIN_GRID_SIZE:
        raise InvalidDnaError(
            f"DNA must be at least a {MIN_GRID_SIZE}x{MIN_GRID_SIZE} matrix",
            InvalidDnaReason.TOO_SMALL,
        )

    for row_index, row in enumerate(dna):
        _check_row(row, row_index, n)

    return DnaGrid(tuple(dna))


def _check_row(row: str | None, row_index: int, n: int) -> None:
    if row is None:
        raise InvalidDnaError(
            "DNA rows must not be null", InvalidDnaReason.NULL_ROW,
            ErrorContext(row=row_index),
        )
    if len(row) != n:
        raise InvalidDnaError(
            f"DNA must be a square {n}x{n} matrix "
            f"(row {row_index} has {len(row)} bases)",
            InvalidDnaReason.NOT_SQUARE,
            ErrorContext(row=row_index),
        )
    for col_index, base in enumerate(row):
        if base not in VALID_BASES:
            raise InvalidDnaError(
                "DNA may only contain the bases A, C, G and T",
                InvalidDnaReason.INVALID_BASE,
                ErrorContext(row=row_index, column=col_index),
            )
