"""DNA Schemas — the request body is typed, not validated for DNA structure."""

import pytest
from pydantic import ValidationError

from mutant_api.schemas.dna import DnaRequest, StatsResponse


def test_accepts_valid_rows(mutant_dna):
    assert DnaRequest(dna=mutant_dna).dna == mutant_dna


def test_passes_null_rows_through_for_the_validator():
    body = DnaRequest(dna=["ATGC", None, "ATGC", "ATGC"])
    assert body.dna[1] is None


def test_passes_malformed_dna_through_for_the_validator():
    body = DnaRequest(dna=["XYZ"])
    assert body.dna == ["XYZ"]


def test_missing_dna_defaults_to_none():
    assert DnaRequest().dna is None


def test_rejects_non_string_rows():
    with pytest.raises(ValidationError):
        DnaRequest(dna=[1, 2, 3, 4])


def test_stats_response_rejects_negative_counts():
    with pytest.raises(ValidationError):
        StatsResponse(count_mutant_dna=-1, count_human_dna=0, ratio=0.0)


def test_stats_response_serializes_public_names():
    dumped = StatsResponse(
        count_mutant_dna=40, count_human_dna=100, ratio=0.4,
    ).model_dump()
    assert dumped == {"count_mutant_dna": 40, "count_human_dna": 100, "ratio": 0.4}
