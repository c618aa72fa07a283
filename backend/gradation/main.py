"""Gradation Exhibitions API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GradationError → {"message", ...echo} responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Schema is owned by alembic migrations; the app never calls create_all
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import gradation.infrastructure.database as database
from gradation.api.error_handlers import register_error_handlers
from gradation.api.routes import exhibitions, health, universities
from gradation.config import get_settings
from gradation.infrastructure.observability import setup_logging

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
    logger.info("Gradation Exhibitions API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("Gradation Exhibitions API shutting down")


app = FastAPI(
    title="Gradation Exhibitions API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(exhibitions.router)
app.include_router(universities.router)

register_error_handlers(app)
