"""
Chart Engine.

Modules:
  base    : BaseChart ABC, RenderContext, LayoutBox and ChartResult.
  engine  : ChartEngine — dynamic instantiation via Registry Pattern.
  scales  : Axis domains, Chart.js axis builders, colour palettes.
  types/  : Concrete charts (line, bar, scatter).
"""

from film_app.services.charts.base import BaseChart, ChartResult, RenderContext
from film_app.services.charts.engine import ChartEngine, chart_engine

__all__ = ["BaseChart", "ChartResult", "RenderContext", "ChartEngine", "chart_engine"]
