"""Todo API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map TodoApiError → structured JSON responses
    - CORS configured from settings; list metadata headers are exposed to browsers
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Three error handler layers live in api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import health, todos
from todo_api.config import get_settings
from todo_api.core.domain_types import ListHeader
from todo_api.infrastructure import database
from todo_api.infrastructure.observability import setup_logging

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
    logger.info("Todo API started")
    yield
    logger.info("Todo API shutting down")
    if database.db_manager:
        await database.db_manager.dispose()


app = FastAPI(
    title="Todo API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[header.value for header in ListHeader] + ["Location"],
)

app.include_router(health.router)
app.include_router(todos.router)

register_error_handlers(app)
