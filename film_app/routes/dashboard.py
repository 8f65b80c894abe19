"""
Dashboard routes — Renders the tab bar and the empty chart panels.

The route:
1. Builds the tab list from ``PANEL_RENDER_MAP``.
2. Asks the FastAPI health endpoint whether the dataset is loaded, so
   the page can show a banner instead of silently empty charts.
3. The frontend JS fetches each chart from
   ``GET /api/v1/charts/{chart_name}`` the first time its tab is shown.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from flask import Blueprint, render_template

from film_app.config.chart_registry import CHART_REGISTRY, ordered_panels
from film_app.core.config import get_settings

logger = logging.getLogger(__name__)

dashboard_bp = Blueprint("dashboard", __name__, url_prefix="/dashboard")


@dashboard_bp.route("/")
def index():
    """Render the dashboard shell."""
    settings = get_settings()
    api_base = settings.API_BASE_URL

    panels = _build_panels()
    health = _fetch_health(api_base)

    if health is None:
        error_message = "Chart API is not reachable"
    elif not health.get("dataset_loaded"):
        error_message = f"Dataset not loaded: {health.get('error') or 'unknown error'}"
    else:
        error_message = None

    return render_template(
        "dashboard/index.html",
        app_name=settings.APP_NAME,
        api_base_url=api_base,
        panels=panels,
        health=health or {},
        error_message=error_message,
    )


# ── Internal helpers ─────────────────────────────────────────────

def _build_panels() -> List[Dict[str, Any]]:
    """Panel dicts (tab order) enriched with chart metadata."""
    panels: List[Dict[str, Any]] = []
    for task_id, info in ordered_panels():
        chart = CHART_REGISTRY.get(info["chart"], {})
        panels.append({
            "task_id": task_id,
            "label": info.get("label", task_id),
            "element_id": info.get("element_id", task_id),
            "chart_name": info["chart"],
            "chart_type": chart.get("chart_type", ""),
            "title": chart.get("display_name", info["chart"]),
        })
    return panels


def _fetch_health(api_base: str) -> Optional[Dict[str, Any]]:
    """Load dataset status from the FastAPI health endpoint."""
    try:
        resp = httpx.get(
            f"{api_base}/api/v1/system/health", timeout=5.0, follow_redirects=True,
        )
        if resp.status_code == 200:
            return resp.json()
        logger.warning(f"[DASHBOARD] Health API returned {resp.status_code}")
    except httpx.HTTPError as exc:
        logger.error(f"[DASHBOARD] Failed to reach API: {exc}")
    return None
