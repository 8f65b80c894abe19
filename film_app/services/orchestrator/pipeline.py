"""
ChartOrchestrator — Thin coordinator for the chart pipeline.

Single Responsibility: wire the phases together in order.

  Load       → DatasetCache        (``film_app.core.cache``)
  Aggregate  → aggregations        (inside each chart)
  Render     → ChartEngine         (``film_app.services.charts.engine``)
  Assembly   → ResponseAssembler   (``assembler.py``)

Usage::

    from film_app.services.orchestrator import chart_orchestrator

    result = chart_orchestrator.execute()
    line = chart_orchestrator.render_one("PopularityLineChart")
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, List, Optional

from film_app.config.chart_registry import CHART_REGISTRY
from film_app.core.cache import dataset_cache
from film_app.core.exceptions import DatasetNotLoadedError
from film_app.services.charts.engine import chart_engine
from film_app.services.orchestrator.assembler import ResponseAssembler
from film_app.services.orchestrator.context import DatasetContext

logger = logging.getLogger(__name__)


class ChartOrchestrator:
    """
    Master coordinator. Renders charts against the cached dataset.

    ``execute()`` flow:
      read dataset → resolve chart names → execute charts → assemble
    """

    def execute(self, chart_names: Optional[List[str]] = None) -> Dict[str, Any]:
        """
        Render ``chart_names`` (all registered charts when omitted).

        Returns:
            ``{"charts": {...}, "metadata": {...}}``; an empty response
            carrying the load error when no dataset is available.
        """
        t0 = time.perf_counter()

        try:
            load_result = dataset_cache.load_result
        except DatasetNotLoadedError as exc:
            logger.warning(f"[Orchestrator] No dataset: {exc}")
            return ResponseAssembler.empty(str(exc))

        ctx = DatasetContext(load_result, chart_names or list(CHART_REGISTRY))
        charts_result = chart_engine.process_charts(ctx.chart_names, ctx.records)
        elapsed = time.perf_counter() - t0

        _log_summary(ctx, charts_result, elapsed)
        return ResponseAssembler.assemble(ctx, charts_result, elapsed)

    def render_one(self, chart_name: str) -> Dict[str, Any]:
        """
        Render a single chart.

        Raises:
            DatasetNotLoadedError: no dataset in the cache.
        """
        records = dataset_cache.records
        return chart_engine.process_chart(chart_name, records)


def _log_summary(
    ctx: DatasetContext,
    charts_result: List[Dict[str, Any]],
    elapsed: float,
) -> None:
    """Log a one-line summary of the completed pipeline."""
    failed = sum(1 for c in charts_result if c.get("chart_type") == "error")
    logger.info(
        f"[Orchestrator] Completed in {elapsed:.3f}s, "
        f"{ctx.total_records} records, {len(charts_result)} charts"
        + (f", {failed} failed" if failed else "")
    )


# ── Singleton ────────────────────────────────────────────────────
chart_orchestrator = ChartOrchestrator()
