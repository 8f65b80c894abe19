"""
Dataset endpoints — summary, rejected rows, derived series and export.

  GET /api/v1/dataset/summary                     → counts and extents
  GET /api/v1/dataset/rejected                    → rows refused by the loader
  GET /api/v1/dataset/series/{name}               → derived series as JSON
  GET /api/v1/dataset/series/{name}/export?fmt=   → CSV / XLSX download
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel

from film_app.api.v1.dependencies import require_dataset
from film_app.core.exceptions import UnknownSeriesError
from film_app.services.charts.scales import extent
from film_app.services.data import export
from film_app.services.data.aggregations import SERIES_BUILDERS, build_series
from film_app.services.data.loader import NUMERIC_COLUMNS, LoadResult

router = APIRouter(prefix="/dataset", tags=["dataset"])


# ── Pydantic response models ────────────────────────────────────

class ExtentModel(BaseModel):
    min: float
    max: float


class DatasetSummaryResponse(BaseModel):
    source: str
    total_rows: int
    records: int
    rejected: int
    extents: Dict[str, Optional[ExtentModel]] = {}
    subjects: int = 0
    years: int = 0


class RejectedRowModel(BaseModel):
    row_number: int
    reason: str
    raw: Dict[str, str] = {}


class SeriesResponse(BaseModel):
    name: str
    rows: List[Dict[str, Any]]


# ── Endpoints ────────────────────────────────────────────────────

@router.get("/summary", response_model=DatasetSummaryResponse)
async def dataset_summary(result: LoadResult = Depends(require_dataset)):
    """Row counts plus the extent of every numeric field."""
    df = result.records
    extents: Dict[str, Optional[ExtentModel]] = {}
    for col in NUMERIC_COLUMNS:
        ext = extent(df[col]) if col in df.columns else None
        extents[col] = ExtentModel(min=ext[0], max=ext[1]) if ext else None

    return DatasetSummaryResponse(
        source=result.source,
        total_rows=result.total_rows,
        records=result.accepted,
        rejected=len(result.rejected),
        extents=extents,
        subjects=int(df["Subject"].nunique()) if not df.empty else 0,
        years=int(df["Year"].nunique()) if not df.empty else 0,
    )


@router.get("/rejected", response_model=List[RejectedRowModel])
async def dataset_rejected(result: LoadResult = Depends(require_dataset)):
    return [RejectedRowModel(**r.to_dict()) for r in result.rejected]


@router.get("/series", response_model=List[str])
async def series_names():
    return list(SERIES_BUILDERS)


@router.get("/series/{name}", response_model=SeriesResponse)
async def series(name: str, result: LoadResult = Depends(require_dataset)):
    return SeriesResponse(name=name, rows=_build(name, result))


@router.get("/series/{name}/export")
async def series_export(
    name: str,
    fmt: str = Query("csv", description="csv | xlsx"),
    result: LoadResult = Depends(require_dataset),
):
    """Download a derived series."""
    if fmt not in export.EXPORT_FORMATS:
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported format '{fmt}'. Use: {', '.join(export.EXPORT_FORMATS)}",
        )

    rows = _build(name, result)
    if fmt == "csv":
        content: Any = export.to_csv(rows)
    else:
        content = export.to_excel_bytes(rows, sheet_name=name)

    return Response(
        content=content,
        media_type=export.EXPORT_FORMATS[fmt],
        headers={"Content-Disposition": f'attachment; filename="{name}.{fmt}"'},
    )


def _build(name: str, result: LoadResult) -> List[Dict[str, Any]]:
    try:
        return build_series(name, result.records)
    except UnknownSeriesError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
