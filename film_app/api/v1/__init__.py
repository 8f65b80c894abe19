"""
API v1 — Router aggregation.
"""

from fastapi import APIRouter

from film_app.api.v1.system import router as system_router
from film_app.api.v1.dataset import router as dataset_router
from film_app.api.v1.charts import router as charts_router
from film_app.api.v1.panels import router as panels_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(system_router)
api_router.include_router(dataset_router)
api_router.include_router(charts_router)
api_router.include_router(panels_router)
