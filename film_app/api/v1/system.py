"""System endpoints — health check, cache info, dataset reload."""

from fastapi import APIRouter, HTTPException

from film_app.core.cache import dataset_cache
from film_app.core.exceptions import DatasetError
from film_app.services.orchestrator import panel_controller

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/health")
async def health_check():
    """Basic liveness probe."""
    info = dataset_cache.get_cache_info()
    return {
        "status": "ok" if dataset_cache.is_loaded else "degraded",
        "dataset_loaded": dataset_cache.is_loaded,
        "records": info.get("records", 0),
        "rejected": info.get("rejected", 0),
        "error": dataset_cache.last_error,
    }


@router.get("/cache/info")
async def cache_info():
    """Return dataset cache statistics (counts, load time)."""
    return dataset_cache.get_cache_info()


@router.post("/dataset/reload")
async def dataset_reload():
    """Re-read the configured CSV and forget every rendered panel."""
    try:
        result = await dataset_cache.load()
    except DatasetError as exc:
        raise HTTPException(status_code=503, detail=str(exc))
    panel_controller.reset()
    return {
        "status": "reloaded",
        "source": result.source,
        "records": result.accepted,
        "rejected": len(result.rejected),
    }
