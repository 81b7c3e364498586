"""Mutant Route — POST /mutant classifies a DNA matrix.

Invariants:
    - 200 when mutant, 403 when human
    - Invalid DNA surfaces as InvalidDnaError (400) via the global handler
    - Store failures surface as StoreUnavailableError (503) via the global handler

Design Decisions:
    - Status code carries the verdict; the body repeats it for clients that ignore codes
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from mutant_api.infrastructure.database import get_db
from mutant_api.infrastructure.dna_record_repository import SqlDnaRecordRepository
from mutant_api.schemas.dna import DnaRequest, MutantResponse
from mutant_api.services.mutant_service import MutantService

router = APIRouter(prefix="/mutant", tags=["mutant"])


def get_mutant_service(db: AsyncSession = Depends(get_db)) -> MutantService:
    return MutantService(SqlDnaRecordRepository(db))


@router.post(
    "",
    response_model=MutantResponse,
    responses={
        status.HTTP_403_FORBIDDEN: {
            "model": MutantResponse, "description": "DNA belongs to a human",
        },
    },
)
async def check_mutant(
    body: DnaRequest, service: MutantService = Depends(get_mutant_service),
):
    """Classify a DNA matrix as mutant (200) or human (403)."""
    verdict = await service.process_dna(body.dna)
    code = status.HTTP_200_OK if verdict else status.HTTP_403_FORBIDDEN
    return JSONResponse(
        status_code=code,
        content=MutantResponse(is_mutant=verdict).model_dump(),
    )
