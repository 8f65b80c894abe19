"""
BaseChart — Abstract base class for all charts.

Single Responsibility: define the contract that every chart must follow.
Charts are "dumb processors": they receive an explicit RenderContext
(pre-scoped records, layout box, config) and return a JSON-ready
Chart.js configuration.  No chart reads module-level state.

Every concrete chart inherits from BaseChart and implements ``process()``.

Usage in a concrete chart::

    from film_app.services.charts.base import BaseChart, ChartResult

    class PopularityLineChart(BaseChart):
        def process(self) -> ChartResult:
            ...
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict

import pandas as pd


@dataclass
class LayoutBox:
    """Outer chart size and margins; the plot area is what remains."""
    width: int = 700
    height: int = 400
    margin: Dict[str, int] = field(
        default_factory=lambda: {"top": 40, "right": 30, "bottom": 40, "left": 60}
    )

    @property
    def inner_width(self) -> int:
        return self.width - self.margin["left"] - self.margin["right"]

    @property
    def inner_height(self) -> int:
        return self.height - self.margin["top"] - self.margin["bottom"]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "margin": dict(self.margin),
            "inner_width": self.inner_width,
            "inner_height": self.inner_height,
        }


@dataclass
class RenderContext:
    """
    Everything a chart needs to build its configuration.

    Populated by the ChartEngine before calling ``process()``.
    """
    chart_id: int
    chart_name: str           # class name / registry key
    display_name: str         # chart title

    # Pre-scoped records (required_columns only)
    records: pd.DataFrame = field(default_factory=pd.DataFrame)

    layout: LayoutBox = field(default_factory=LayoutBox)

    # Chart-specific config from CHART_REGISTRY.default_config
    config: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ChartResult:
    """
    Standardized output from any chart.

    Serialized to JSON by the orchestrator.
    """
    chart_id: int
    chart_name: str
    chart_type: str
    data: Any
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chart_id": self.chart_id,
            "chart_name": self.chart_name,
            "chart_type": self.chart_type,
            "data": self.data,
            "metadata": self.metadata,
        }


class BaseChart(ABC):
    """
    Abstract base class for all charts.

    Subclasses MUST implement:
      - ``process()`` → ChartResult
    """

    def __init__(self, ctx: RenderContext) -> None:
        self.ctx = ctx

    @abstractmethod
    def process(self) -> ChartResult:
        """
        Build the chart configuration from ``self.ctx``.

        Returns:
            ChartResult with a Chart.js-ready ``data`` dict.
        """
        ...

    # ── Convenience properties ───────────────────────────────────

    @property
    def chart_id(self) -> int:
        return self.ctx.chart_id

    @property
    def display_name(self) -> str:
        return self.ctx.display_name

    @property
    def df(self) -> pd.DataFrame:
        return self.ctx.records

    @property
    def config(self) -> Dict[str, Any]:
        return self.ctx.config

    # ── Result builders ──────────────────────────────────────────

    def _result(self, chart_type: str, data: Dict[str, Any], **meta: Any) -> ChartResult:
        """Shorthand to build a ChartResult; adds title and layout."""
        data = {
            "type": chart_type,
            "title": self.display_name,
            "layout": self.ctx.layout.to_dict(),
            **data,
        }
        return ChartResult(
            chart_id=self.chart_id,
            chart_name=self.display_name,
            chart_type=chart_type,
            data=data,
            metadata={"chart_category": "chart", **meta},
        )

    def _empty(self, chart_type: str) -> ChartResult:
        """Build a standard empty-data result."""
        return ChartResult(
            chart_id=self.chart_id,
            chart_name=self.display_name,
            chart_type=chart_type,
            data=None,
            metadata={"empty": True, "message": "No data available"},
        )
