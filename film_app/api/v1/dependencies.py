"""
FastAPI dependencies — Eliminates boilerplate in dataset endpoints.

Usage in endpoints::

    @router.get("/summary")
    async def summary(result: LoadResult = Depends(require_dataset)):
        # result.records is guaranteed to exist
"""

from __future__ import annotations

from fastapi import HTTPException

from film_app.core.cache import dataset_cache
from film_app.core.exceptions import DatasetNotLoadedError
from film_app.services.data.loader import LoadResult


def require_dataset() -> LoadResult:
    """Dependency: ensure the dataset is loaded and return it."""
    try:
        return dataset_cache.load_result
    except DatasetNotLoadedError as exc:
        raise HTTPException(
            status_code=503, detail=f"Dataset not loaded: {exc}"
        ) from exc
