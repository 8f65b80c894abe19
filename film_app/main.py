"""
FastAPI application factory + lifespan.

This is the **data engine** of the dashboard:
- REST API for chart payloads, panels, dataset summary and series.
- DatasetCache loaded once at startup.
- CORS configured for the Flask frontend.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from film_app.api.v1 import api_router
from film_app.core.cache import dataset_cache
from film_app.core.config import settings
from film_app.core.exceptions import DatasetError
from film_app.core.logging_setup import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: load the film dataset (a failure is logged and reported
    by ``/api/v1/system/health``; the API still starts).
    Shutdown: drop the cached dataset.
    """
    logger.info(f"[API] Starting {settings.APP_NAME} …")
    try:
        result = await dataset_cache.load(settings.DATASET_PATH)
        logger.info(
            f"[API] Dataset ready: {result.accepted} records, "
            f"{len(result.rejected)} rejected"
        )
    except DatasetError as exc:
        logger.error(f"[API] Dataset unavailable: {exc}")

    yield

    logger.info("[API] Shutting down …")
    dataset_cache.clear()


def create_fastapi_app() -> FastAPI:
    """Application factory for FastAPI."""
    setup_logging()

    app = FastAPI(
        title="Film Dashboard API",
        description="Chart payloads for the film dataset dashboard",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/api/docs" if settings.DEBUG else None,
        redoc_url="/api/redoc" if settings.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            f"http://localhost:{settings.FLASK_PORT}",
            f"http://127.0.0.1:{settings.FLASK_PORT}",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.get("/")
    async def root():
        return {
            "app": settings.APP_NAME,
            "version": "1.0.0",
            "status": "running",
            "docs": "/api/docs" if settings.DEBUG else "disabled",
        }

    return app


# Module-level instance for ``uvicorn film_app.main:app``
app = create_fastapi_app()
