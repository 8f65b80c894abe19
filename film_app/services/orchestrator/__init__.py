"""
Orchestrator package — chart execution workflow.

Modules:
  context    — DatasetContext data container
  assembler  — Response JSON assembly
  pipeline   — ChartOrchestrator coordinator
  panels     — PanelController (tab visibility + render-once state)

Usage::

    from film_app.services.orchestrator import chart_orchestrator, panel_controller

    result = chart_orchestrator.execute()
    panel_controller.select("task2")
"""

from film_app.services.orchestrator.assembler import ResponseAssembler
from film_app.services.orchestrator.context import DatasetContext
from film_app.services.orchestrator.panels import PanelController
from film_app.services.orchestrator.pipeline import (
    ChartOrchestrator,
    chart_orchestrator,
)

panel_controller = PanelController(chart_orchestrator.render_one)

__all__ = [
    "DatasetContext",
    "ChartOrchestrator",
    "chart_orchestrator",
    "PanelController",
    "panel_controller",
    "ResponseAssembler",
]
