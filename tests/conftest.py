"""Root conftest — shared test configuration and DNA fixtures."""

import os

import pytest

# Ensure tests never reach a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")


MUTANT_DNA = ["ATGCGA", "CAGTGC", "TTATGT", "AGAAGG", "CCCCTA", "TCACTG"]
HUMAN_DNA = ["ATGCGA", "CAGTGC", "TTATTT", "AGACGG", "GCGTCA", "TCACTG"]


@pytest.fixture
def mutant_dna() -> list[str]:
    return list(MUTANT_DNA)


@pytest.fixture
def human_dna() -> list[str]:
    return list(HUMAN_DNA)
