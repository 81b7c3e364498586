"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - DnaGrid is a validated, immutable tuple of rows (only validate_dna builds one)
    - DnaFingerprint is a 64-char lowercase hex SHA-256 digest
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

DnaGrid = NewType("DnaGrid", tuple[str, ...])
DnaFingerprint = NewType("DnaFingerprint", str)


# ─── Constants ───────────────────────────────────────────────────

SEQUENCE_LENGTH = 4          # identical bases per qualifying window
MIN_GRID_SIZE = SEQUENCE_LENGTH
MUTANT_THRESHOLD = 2         # strictly more than one window
ROW_DELIMITER = "-"          # never a valid base


# ─── Enums ───────────────────────────────────────────────────────

class Nucleobase(str, Enum):
    """The four symbols a DNA row may contain."""
    ADENINE = "A"
    THYMINE = "T"
    CYTOSINE = "C"
    GUANINE = "G"


VALID_BASES = frozenset(b.value for b in Nucleobase)


class Direction(str, Enum):
    """Scan directions, each with its (row, col) step."""
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL_DOWN = "diagonal_down"
    DIAGONAL_UP = "diagonal_up"

    @property
    def step(self) -> tuple[int, int]:
        return _DIRECTION_STEPS[self]


_DIRECTION_STEPS = {
    Direction.HORIZONTAL: (0, 1),
    Direction.VERTICAL: (1, 0),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (-1, 1),
}


@dataclass(frozen=True)
class SequenceMatch:
    """One qualifying window, anchored at its first cell."""
    row: int
    col: int
    direction: Direction
