"""
ResponseAssembler — Packages chart results into the final JSON.

Output schema::

    {
        "charts": {
            "<chart_id>": { ...chart result... },
            ...
        },
        "metadata": {
            "total_records": int,
            "total_rejected": int,
            "source": str,
            "chart_count": int,
            "elapsed_seconds": float,
            "timestamp": str,
            "error": str | None,
        }
    }
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List

from film_app.services.orchestrator.context import DatasetContext


class ResponseAssembler:
    """Stateless helper that builds the charts JSON response."""

    @staticmethod
    def assemble(
        ctx: DatasetContext,
        charts_result: List[Dict[str, Any]],
        elapsed: float,
    ) -> Dict[str, Any]:
        return {
            "charts": _index_charts(charts_result),
            "metadata": {
                "total_records": ctx.total_records,
                "total_rejected": ctx.total_rejected,
                "source": ctx.source,
                "chart_count": len(charts_result),
                "elapsed_seconds": round(elapsed, 3),
                "timestamp": datetime.now().isoformat(),
                "error": None,
            },
        }

    @staticmethod
    def empty(error: str = "") -> Dict[str, Any]:
        """Valid-but-empty response when no dataset is available."""
        return {
            "charts": {},
            "metadata": {
                "total_records": 0,
                "total_rejected": 0,
                "source": "",
                "chart_count": 0,
                "elapsed_seconds": 0,
                "timestamp": datetime.now().isoformat(),
                "error": error,
            },
        }


def _index_charts(charts_result: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Key the chart list by ``chart_id`` (falls back to ``chart_name``)."""
    indexed: Dict[str, Any] = {}
    for c in charts_result:
        key = str(c.get("chart_id") or c.get("chart_name", "unknown"))
        indexed[key] = c
    return indexed
