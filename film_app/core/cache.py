"""
DatasetCache — In-memory holder for the loaded film dataset.

Loaded once by the FastAPI lifespan (and on explicit reload).
The dataset is read-only after load: services read ``records`` and
never write back into it.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

import pandas as pd

from film_app.core.config import settings
from film_app.core.exceptions import DatasetError, DatasetNotLoadedError
from film_app.services.data.loader import LoadResult, RejectedRow, load_dataset_async

logger = logging.getLogger(__name__)


@dataclass
class CacheEntry:
    """Container for a cached dataset with load-time metadata."""
    data: LoadResult
    loaded_at: datetime = field(default_factory=datetime.now)

    @property
    def age_seconds(self) -> float:
        return (datetime.now() - self.loaded_at).total_seconds()


class DatasetCache:
    """
    Singleton in-memory cache.

    Usage::

        from film_app.core.cache import dataset_cache

        await dataset_cache.load()            # at startup
        df = dataset_cache.records            # pd.DataFrame
    """

    _instance: Optional["DatasetCache"] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not DatasetCache._initialized:
            self._entry: Optional[CacheEntry] = None
            self._last_error: Optional[str] = None
            self._lock = asyncio.Lock()
            DatasetCache._initialized = True

    # ── State ────────────────────────────────────────────────────

    @property
    def is_loaded(self) -> bool:
        return self._entry is not None

    @property
    def last_error(self) -> Optional[str]:
        return self._last_error

    # ── Loading ──────────────────────────────────────────────────

    async def load(self, path: Optional[str] = None) -> LoadResult:
        """
        Load (or reload) the dataset from ``path`` / ``DATASET_PATH``.

        On failure the previous dataset is kept, the error message is
        stored in ``last_error`` and the exception is re-raised.
        """
        source = path or settings.DATASET_PATH
        async with self._lock:
            try:
                result = await load_dataset_async(source)
            except DatasetError as exc:
                self._last_error = str(exc)
                logger.error(f"[DatasetCache] Load failed for {source}: {exc}")
                raise
            self._entry = CacheEntry(data=result)
            self._last_error = None
        return result

    def set_result(self, result: LoadResult) -> None:
        """Install an already-loaded dataset (tests, CLI tools)."""
        self._entry = CacheEntry(data=result)
        self._last_error = None

    def clear(self) -> None:
        self._entry = None
        self._last_error = None

    # ── Getters ──────────────────────────────────────────────────

    @property
    def load_result(self) -> LoadResult:
        if self._entry is None:
            raise DatasetNotLoadedError(
                self._last_error or "Dataset has not been loaded"
            )
        return self._entry.data

    @property
    def records(self) -> pd.DataFrame:
        return self.load_result.records

    @property
    def rejected(self) -> List[RejectedRow]:
        return self.load_result.rejected

    def get_cache_info(self) -> Dict[str, Any]:
        """Cache statistics for the system endpoints."""
        if self._entry is None:
            return {"loaded": False, "error": self._last_error}
        result = self._entry.data
        return {
            "loaded": True,
            "source": result.source,
            "records": result.accepted,
            "rejected": len(result.rejected),
            "loaded_at": self._entry.loaded_at.isoformat(),
            "age_seconds": self._entry.age_seconds,
        }


dataset_cache = DatasetCache()
