"""Stats Route — GET /stats reports how many mutants and humans were verified."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mutant_api.infrastructure.database import get_db
from mutant_api.infrastructure.dna_record_repository import SqlDnaRecordRepository
from mutant_api.schemas.dna import StatsResponse
from mutant_api.services.stats_service import StatsService

router = APIRouter(prefix="/stats", tags=["stats"])


def get_stats_service(db: AsyncSession = Depends(get_db)) -> StatsService:
    return StatsService(SqlDnaRecordRepository(db))


@router.get("", response_model=StatsResponse)
async def get_stats(service: StatsService = Depends(get_stats_service)):
    """Mutant count, human count and their ratio."""
    return StatsResponse(**await service.get_stats())
