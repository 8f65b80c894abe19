"""
ChartEngine — Dynamic chart instantiation via Registry Pattern.

Single Responsibility: given a list of chart class names, instantiate
the correct concrete class and execute ``process()``.

Uses ``CHART_REGISTRY`` for metadata and Python's module system for
class resolution.  No hardcoded if/else chains.

Usage::

    from film_app.services.charts.engine import chart_engine

    results = chart_engine.process_charts(
        chart_names=["PopularityLineChart", "SubjectBarChart"],
        records=records_df,
    )
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, Dict, List, Optional, Type

import pandas as pd

from film_app.config.chart_registry import CHART_REGISTRY
from film_app.core.config import settings
from film_app.services.charts.base import BaseChart, LayoutBox, RenderContext

logger = logging.getLogger(__name__)

# Module path where concrete charts live
_CHART_MODULE = "film_app.services.charts.types"


class ChartEngine:
    """
    Dynamic chart resolver and executor.

    Pipeline per chart:
      1. Look up metadata in CHART_REGISTRY.
      2. Import the concrete class from ``services/charts/types/``.
      3. Build RenderContext with pre-scoped records.
      4. Call ``chart.process()`` → ChartResult.
    """

    def __init__(self) -> None:
        # Cache: class_name → class object (avoids repeated imports)
        self._class_cache: Dict[str, Type[BaseChart]] = {}

    def process_charts(
        self,
        chart_names: List[str],
        records: pd.DataFrame,
    ) -> List[Dict[str, Any]]:
        """
        Process a batch of charts and return their serialized results.

        A chart that fails produces an ``error`` result; the rest of the
        batch is unaffected.
        """
        return [self.process_chart(name, records) for name in chart_names]

    def process_chart(self, class_name: str, records: pd.DataFrame) -> Dict[str, Any]:
        """Process one chart and return its serialized result."""
        registry_entry = CHART_REGISTRY.get(class_name)
        if not registry_entry:
            logger.warning(f"[ChartEngine] '{class_name}' not in CHART_REGISTRY")
            return self._error_result(class_name, "Chart not registered")

        chart_cls = self._resolve_class(class_name)
        if chart_cls is None:
            return self._error_result(
                class_name, f"Class '{class_name}' not found in {_CHART_MODULE}",
            )

        ctx = self.build_context(class_name, registry_entry, records)

        try:
            chart = chart_cls(ctx)
            result = chart.process()
            return result.to_dict()
        except Exception as exc:
            logger.error(
                f"[ChartEngine] Error processing '{class_name}': {exc}",
                exc_info=True,
            )
            return self._error_result(class_name, str(exc))

    @staticmethod
    def build_context(
        class_name: str,
        registry_entry: dict,
        records: pd.DataFrame,
    ) -> RenderContext:
        """Build the explicit render context handed to one chart."""
        config = dict(registry_entry.get("default_config", {}))
        layout = LayoutBox(
            width=settings.CHART_WIDTH,
            height=settings.CHART_HEIGHT,
            margin=dict(config.get("margin", LayoutBox().margin)),
        )
        return RenderContext(
            chart_id=registry_entry.get("chart_id", 0),
            chart_name=class_name,
            display_name=registry_entry.get("display_name", class_name),
            records=ChartEngine._scope_data(registry_entry, records),
            layout=layout,
            config=config,
        )

    def _resolve_class(self, class_name: str) -> Optional[Type[BaseChart]]:
        """
        Import and cache the chart class by its name.

        Converts CamelCase class name to snake_case module name:
          ``PopularityLineChart`` → ``popularity_line_chart``
        """
        if class_name in self._class_cache:
            return self._class_cache[class_name]

        module_name = self._class_to_module(class_name)
        full_path = f"{_CHART_MODULE}.{module_name}"

        try:
            module = importlib.import_module(full_path)
            cls = getattr(module, class_name, None)
            if isinstance(cls, type) and issubclass(cls, BaseChart):
                self._class_cache[class_name] = cls
                return cls
            logger.error(
                f"[ChartEngine] {full_path} does not export '{class_name}' "
                f"as a BaseChart subclass"
            )
        except ImportError as exc:
            logger.error(f"[ChartEngine] Cannot import {full_path}: {exc}")

        return None

    @staticmethod
    def _class_to_module(class_name: str) -> str:
        """
        Convert CamelCase to snake_case for module resolution.

        ``SubjectBarChart``          → ``subject_bar_chart``
        ``LengthPopularityScatter``  → ``length_popularity_scatter``
        """
        result: List[str] = []
        for i, ch in enumerate(class_name):
            if ch.isupper() and i > 0:
                result.append("_")
            result.append(ch.lower())
        return "".join(result)

    @staticmethod
    def _scope_data(registry_entry: dict, records: pd.DataFrame) -> pd.DataFrame:
        """
        Apply Data Scoping: return only required_columns.

        Missing optional columns are skipped; an empty list means the
        full DataFrame.
        """
        if records.empty:
            return records

        required = registry_entry.get("required_columns", [])
        if not required:
            return records

        available = [c for c in required if c in records.columns]
        return records[available] if available else records

    @staticmethod
    def _error_result(class_name: str, error: str) -> Dict[str, Any]:
        """Build an error result dict for a failed chart."""
        entry = CHART_REGISTRY.get(class_name, {})
        return {
            "chart_id": entry.get("chart_id", 0),
            "chart_name": class_name,
            "chart_type": "error",
            "data": None,
            "metadata": {"error": True, "message": error},
        }


# ── Singleton ────────────────────────────────────────────────────
chart_engine = ChartEngine()
