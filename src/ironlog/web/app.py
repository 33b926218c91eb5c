"""FastAPI application for the ironlog API."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from .. import __version__
from ..config import Settings
from ..db.engine import Database
from .routers import progression, sets, summary, workouts

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup: make sure the schema exists before serving requests
    await app.state.database.init()
    logger.info("ironlog %s ready (db=%s)", __version__, app.state.database.path)
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(
        title="ironlog",
        description="Workout tracking with automatic weight progression",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.database = Database(settings.database_path)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log method, path, status and duration of every request."""
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response

    # Include routers
    app.include_router(workouts.router)
    app.include_router(sets.router)
    app.include_router(summary.router)
    app.include_router(progression.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
