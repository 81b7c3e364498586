"""Domain Types — verifies value types, constants, and enum values.

Tests:
    - Nucleobase covers exactly the four valid bases
    - Direction steps match the scan geometry
    - Threshold constants encode "more than one window of four"
"""

from mutant_api.core.domain_types import (
    Direction, DnaFingerprint, DnaGrid, MIN_GRID_SIZE, MUTANT_THRESHOLD,
    Nucleobase, ROW_DELIMITER, SEQUENCE_LENGTH, VALID_BASES,
)


def test_valid_bases_are_atcg():
    assert VALID_BASES == {"A", "T", "C", "G"}
    assert {b.value for b in Nucleobase} == VALID_BASES


def test_delimiter_is_not_a_base():
    assert ROW_DELIMITER not in VALID_BASES


def test_thresholds():
    assert SEQUENCE_LENGTH == 4
    assert MIN_GRID_SIZE == 4
    assert MUTANT_THRESHOLD == 2


def test_direction_steps():
    assert Direction.HORIZONTAL.step == (0, 1)
    assert Direction.VERTICAL.step == (1, 0)
    assert Direction.DIAGONAL_DOWN.step == (1, 1)
    assert Direction.DIAGONAL_UP.step == (-1, 1)


def test_value_types_wrap_builtins():
    assert DnaGrid(("ATGC",)) == ("ATGC",)
    assert DnaFingerprint("ab" * 32) == "ab" * 32


def test_enums_serialize_to_value():
    assert Direction.DIAGONAL_UP.value == "diagonal_up"
    assert Nucleobase.GUANINE.value == "G"
