"""DNA Schemas — request/response models for the /mutant and /stats endpoints.

Invariants:
    - DnaRequest only types the body: structural DNA checks belong to validate_dna
    - Null rows and a missing dna field pass through so validate_dna reports them
      with a specific reason
    - StatsResponse field names are the public JSON contract

Design Decisions:
    - Examples embedded in json_schema_extra so the generated OpenAPI page is usable
"""

from pydantic import BaseModel, ConfigDict, Field


class DnaRequest(BaseModel):
    """POST /mutant body — rows of an NxN DNA matrix."""
    model_config = ConfigDict(json_schema_extra={
        "examples": [{
            "dna": [
                "ATGCGA", "CAGTGC", "TTATGT", "AGAAGG", "CCCCTA", "TCACTG",
            ],
        }],
    })

    dna: list[str | None] | None = Field(
        None, description="Rows of the DNA matrix, only A, T, C and G",
    )


class MutantResponse(BaseModel):
    """POST /mutant result — 200 for mutants, 403 for humans."""
    is_mutant: bool


class StatsResponse(BaseModel):
    """GET /stats result."""
    count_mutant_dna: int = Field(ge=0)
    count_human_dna: int = Field(ge=0)
    ratio: float = Field(ge=0.0)
