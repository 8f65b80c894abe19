"""
Panel endpoints — tab list and selection.

  GET  /api/v1/panels/                  → panels with visible/rendered flags
  POST /api/v1/panels/{task_id}/select  → show one panel, render it once
"""

from fastapi import APIRouter, Depends, HTTPException

from film_app.api.v1.dependencies import require_dataset
from film_app.core.exceptions import UnknownPanelError
from film_app.services.data.loader import LoadResult
from film_app.services.orchestrator import panel_controller

router = APIRouter(prefix="/panels", tags=["panels"])


@router.get("/")
async def list_panels():
    return {
        "visible": panel_controller.visible_panel,
        "panels": panel_controller.panels(),
    }


@router.post("/{task_id}/select")
async def select_panel(task_id: str, _: LoadResult = Depends(require_dataset)):
    try:
        return panel_controller.select(task_id)
    except UnknownPanelError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
