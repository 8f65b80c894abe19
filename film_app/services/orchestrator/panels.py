"""
PanelController — tab selection with render-once memoisation.

Each panel (tab) shows one chart.  Selecting a panel makes it the only
visible one and renders its chart the first time only; the controller
owns an explicit ``rendered`` flag per panel instead of inspecting the
page.  A chart that comes back as an error is not memoised, so the next
selection retries it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from film_app.config.chart_registry import PANEL_RENDER_MAP
from film_app.core.exceptions import UnknownPanelError

logger = logging.getLogger(__name__)

RenderFn = Callable[[str], Dict[str, Any]]


@dataclass
class PanelState:
    task_id: str
    chart_name: str
    label: str
    element_id: str
    order: int
    visible: bool = False
    rendered: bool = False
    payload: Optional[Dict[str, Any]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "task_id": self.task_id,
            "chart_name": self.chart_name,
            "label": self.label,
            "element_id": self.element_id,
            "order": self.order,
            "visible": self.visible,
            "rendered": self.rendered,
        }


class PanelController:
    """
    Owns panel visibility and per-panel rendered state.

    Args:
        render: callable taking a chart class name and returning the
                serialized chart result.
        panels: panel map (defaults to ``PANEL_RENDER_MAP``).
    """

    def __init__(self, render: RenderFn, panels: Optional[Dict[str, dict]] = None) -> None:
        self._render = render
        panel_map = panels if panels is not None else PANEL_RENDER_MAP
        self._panels: Dict[str, PanelState] = {
            task_id: PanelState(
                task_id=task_id,
                chart_name=info["chart"],
                label=info.get("label", task_id),
                element_id=info.get("element_id", task_id),
                order=info.get("order", 0),
            )
            for task_id, info in sorted(
                panel_map.items(), key=lambda item: item[1].get("order", 0)
            )
        }
        self.draw_count = 0

    # ── Selection ────────────────────────────────────────────────

    def select(self, task_id: str) -> Dict[str, Any]:
        """
        Show ``task_id`` (hiding every other panel) and return its chart.

        The chart is rendered on first selection only.
        """
        panel = self._get(task_id)
        for other in self._panels.values():
            other.visible = other is panel

        already_rendered = panel.rendered
        if not already_rendered:
            payload = self._render(panel.chart_name)
            self.draw_count += 1
            if payload.get("chart_type") != "error":
                panel.payload = payload
                panel.rendered = True
            else:
                logger.warning(
                    f"[PanelController] {task_id} render failed: "
                    f"{payload.get('metadata', {}).get('message')}"
                )
                panel.payload = payload

        return {
            "task_id": task_id,
            "already_rendered": already_rendered,
            "panel": panel.to_dict(),
            "chart": panel.payload,
        }

    def reset(self) -> None:
        """Forget every rendered chart (dataset reload)."""
        for panel in self._panels.values():
            panel.rendered = False
            panel.payload = None
        self.draw_count = 0
        logger.info("[PanelController] Panel state reset")

    # ── Queries ──────────────────────────────────────────────────

    @property
    def visible_panel(self) -> Optional[str]:
        for task_id, panel in self._panels.items():
            if panel.visible:
                return task_id
        return None

    def is_rendered(self, task_id: str) -> bool:
        return self._get(task_id).rendered

    def panels(self) -> List[Dict[str, Any]]:
        return [p.to_dict() for p in self._panels.values()]

    def _get(self, task_id: str) -> PanelState:
        panel = self._panels.get(task_id)
        if panel is None:
            raise UnknownPanelError(task_id)
        return panel
