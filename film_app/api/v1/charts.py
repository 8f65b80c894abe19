"""
Chart endpoints.

  GET /api/v1/charts/               → every registered chart (orchestrator)
  GET /api/v1/charts/{chart_name}   → one chart payload
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from film_app.api.v1.dependencies import require_dataset
from film_app.config.chart_registry import CHART_REGISTRY
from film_app.services.data.loader import LoadResult
from film_app.services.orchestrator import chart_orchestrator

router = APIRouter(prefix="/charts", tags=["charts"])


class ChartsMetadataResponse(BaseModel):
    total_records: int = 0
    total_rejected: int = 0
    source: str = ""
    chart_count: int = 0
    elapsed_seconds: float = 0
    timestamp: str = ""
    error: Optional[str] = None


class ChartsResponse(BaseModel):
    charts: Dict[str, Any]
    metadata: ChartsMetadataResponse


@router.get("/", response_model=ChartsResponse)
async def all_charts(
    names: Optional[str] = Query(
        None, description="Comma-separated chart class names; all when omitted.",
    ),
    _: LoadResult = Depends(require_dataset),
):
    chart_names: Optional[List[str]] = None
    if names:
        chart_names = [n.strip() for n in names.split(",") if n.strip()]
        unknown = [n for n in chart_names if n not in CHART_REGISTRY]
        if unknown:
            raise HTTPException(
                status_code=404, detail=f"Unknown charts: {', '.join(unknown)}",
            )
    return chart_orchestrator.execute(chart_names)


@router.get("/{chart_name}")
async def one_chart(chart_name: str, _: LoadResult = Depends(require_dataset)):
    if chart_name not in CHART_REGISTRY:
        raise HTTPException(status_code=404, detail=f"Unknown chart '{chart_name}'")
    return chart_orchestrator.render_one(chart_name)
