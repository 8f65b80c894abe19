"""Tests for PanelController tab selection and render-once memoisation."""

from __future__ import annotations

from typing import Any, Dict, List

import pytest

from film_app.core.exceptions import UnknownPanelError
from film_app.services.orchestrator import panel_controller
from film_app.services.orchestrator.panels import PanelController

pytestmark = pytest.mark.unit


class FakeRenderer:
    def __init__(self, fail: bool = False) -> None:
        self.calls: List[str] = []
        self.fail = fail

    def __call__(self, chart_name: str) -> Dict[str, Any]:
        self.calls.append(chart_name)
        if self.fail:
            return {"chart_type": "error", "data": None, "metadata": {"message": "nope"}}
        return {"chart_type": "line", "data": {"marks": len(self.calls)}, "metadata": {}}


def test_second_selection_does_not_redraw() -> None:
    render = FakeRenderer()
    controller = PanelController(render)

    first = controller.select("task1")
    second = controller.select("task1")

    assert first["already_rendered"] is False
    assert second["already_rendered"] is True
    assert second["chart"] == first["chart"]
    assert render.calls == ["PopularityLineChart"]
    assert controller.draw_count == 1


def test_exactly_one_panel_visible() -> None:
    controller = PanelController(FakeRenderer())

    assert controller.visible_panel is None
    controller.select("task1")
    controller.select("task3")

    visible = [p["task_id"] for p in controller.panels() if p["visible"]]
    assert visible == ["task3"]
    assert controller.visible_panel == "task3"
    assert controller.is_rendered("task1") is True
    assert controller.is_rendered("task2") is False


def test_switching_back_reuses_memoised_charts() -> None:
    render = FakeRenderer()
    controller = PanelController(render)

    for task_id in ("task1", "task2", "task1", "task3", "task2"):
        controller.select(task_id)

    assert render.calls == ["PopularityLineChart", "SubjectBarChart", "LengthPopularityScatter"]
    assert controller.draw_count == 3


def test_failed_render_is_retried() -> None:
    render = FakeRenderer(fail=True)
    controller = PanelController(render)

    controller.select("task2")
    assert controller.is_rendered("task2") is False

    render.fail = False
    result = controller.select("task2")

    assert result["already_rendered"] is False
    assert controller.is_rendered("task2") is True
    assert render.calls == ["SubjectBarChart", "SubjectBarChart"]


def test_unknown_panel_raises() -> None:
    controller = PanelController(FakeRenderer())

    with pytest.raises(UnknownPanelError):
        controller.select("task9")


def test_reset_forgets_rendered_state() -> None:
    render = FakeRenderer()
    controller = PanelController(render)
    controller.select("task1")

    controller.reset()

    assert controller.is_rendered("task1") is False
    assert controller.select("task1")["already_rendered"] is False
    assert len(render.calls) == 2


def test_panels_follow_order_key() -> None:
    panels = {
        "b": {"chart": "SubjectBarChart", "order": 2},
        "a": {"chart": "PopularityLineChart", "order": 1},
    }
    controller = PanelController(FakeRenderer(), panels=panels)

    assert [p["task_id"] for p in controller.panels()] == ["a", "b"]


def test_shared_controller_renders_real_chart(loaded_dataset) -> None:
    result = panel_controller.select("task2")
    again = panel_controller.select("task2")

    assert result["chart"]["data"]["labels"] == ["Comedy", "Drama", "Horror"]
    assert again["already_rendered"] is True
    assert panel_controller.draw_count == 1
