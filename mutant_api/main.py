"""Mutant API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map MutantApiError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers registered by api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mutant_api.api.error_handlers import register_error_handlers
from mutant_api.infrastructure import database
from mutant_api.infrastructure.observability import setup_logging
from mutant_api.config import get_settings
from mutant_api.api.routes import health, mutant, stats

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Mutant API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Mutant API shutting down")


app = FastAPI(
    title="Mutant API", version="1.0.0", lifespan=lifespan,
    description=(
        "Detects mutant DNA: more than one run of four identical bases "
        "horizontally, vertically or diagonally."
    ),
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(mutant.router)
app.include_router(stats.router)

register_error_handlers(app)
