"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, routes, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator, Iterator
from contextlib import asynccontextmanager, contextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository import memory, postgres, sqlite
from src.api.errors import register_exception_handlers
from src.api.routes import router as students_router
from src.config.settings import Settings, get_settings
from src.domain.ports import StudentRepository

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "students",
        "description": "Create, read, update and delete student records",
    },
]


@contextmanager
def open_repository(settings: Settings) -> Iterator[StudentRepository]:
    """
    Open the configured storage backend and yield its repository.

    Runs the create-if-absent migrations before yielding and closes
    the underlying handle on exit.
    """
    if settings.storage_backend == "memory":
        logger.info("Using in-memory storage")
        yield memory.InMemoryStudentRepository()
        return

    if settings.storage_backend == "postgres":
        logger.info("Connecting to database...")
        # Create connection pool with explicit sizing
        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            open=True,
        )
        try:
            logger.info("Running database migrations...")
            postgres.run_migrations(pool)
            yield postgres.PostgresStudentRepository(pool)
        finally:
            pool.close()
            logger.info("Database connection pool closed")
        return

    logger.info("Opening SQLite storage at %s", settings.storage_path)
    connection = sqlite.connect(settings.storage_path)
    try:
        logger.info("Running database migrations...")
        sqlite.run_migrations(connection)
        yield sqlite.SqliteStudentRepository(connection)
    finally:
        connection.close()
        logger.info("SQLite storage closed")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Opens the storage backend on startup
    - Runs migrations on startup
    - Closes the storage handle on shutdown
    """
    settings = get_settings()

    logger.info("Starting application (env=%s)...", settings.env)

    with open_repository(settings) as repository:
        # Store repository in app state for dependency injection
        app.state.repository = repository

        logger.info("Application startup complete")

        yield

        # Shutdown
        logger.info("Shutting down application...")


app = FastAPI(
    title="students-api",
    description="Students API - CRUD service for student records",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(students_router, prefix="/api")


@app.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with storage validation.

    Returns 200 OK if application and storage are healthy.
    A storage failure is reported through the error envelope as 500.
    """
    request.app.state.repository.ping()
    return {"status": "healthy"}
