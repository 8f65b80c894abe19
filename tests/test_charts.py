"""Tests for chart configurations and ChartEngine error isolation."""

from __future__ import annotations

import pandas as pd
import pytest

from film_app.services.charts.engine import ChartEngine
from film_app.services.charts.scales import (
    AWARDS_PALETTE,
    GRAY,
    GREEN,
    RED,
    alpha,
    extent,
    zero_based,
)
from film_app.services.charts.types.subject_bar_chart import SubjectBarChart

pytestmark = pytest.mark.unit


@pytest.fixture
def engine() -> ChartEngine:
    return ChartEngine()


def test_line_chart_domains_and_points(engine, records) -> None:
    result = engine.process_chart("PopularityLineChart", records)

    assert result["chart_type"] == "line"
    data = result["data"]
    assert data["title"] == "Average Film Popularity Over Years"
    assert data["scales"]["x"]["min"] == 2000
    assert data["scales"]["x"]["max"] == 2002
    assert data["scales"]["x"]["ticks"]["format"] == "d"
    assert data["scales"]["y"]["min"] == 0
    assert data["scales"]["y"]["max"] == 70.0

    points = data["datasets"][0]["data"]
    assert [(p["x"], p["y"]) for p in points] == [(2000, 60.0), (2001, 40.0), (2002, 70.0)]
    assert points[0]["films"] == 2
    assert points[0]["tooltip"] == "2000: 60.00 avg popularity (2 films)"
    assert data["datasets"][0]["borderColor"] == "#4682b4"


def test_bar_chart_band_domain_follows_count_order(engine, records) -> None:
    result = engine.process_chart("SubjectBarChart", records)

    data = result["data"]
    assert data["labels"] == ["Comedy", "Drama", "Horror"]
    assert data["scales"]["x"]["labels"] == ["Comedy", "Drama", "Horror"]
    assert data["scales"]["x"]["ticks"]["maxRotation"] == 40
    assert data["scales"]["y"]["min"] == 0
    assert data["scales"]["y"]["max"] == 3

    dataset = data["datasets"][0]
    assert dataset["data"] == [3, 1, 1]
    assert dataset["categoryPercentage"] == 0.8
    assert dataset["backgroundColor"] == "#ff8c00"
    assert result["metadata"]["total_films"] == len(records)


def test_scatter_colours_by_awards_with_unknown_category(engine, records) -> None:
    result = engine.process_chart("LengthPopularityScatter", records)

    data = result["data"]
    labels = [d["label"] for d in data["datasets"]]
    assert labels == ["Awards: Yes", "Awards: No", "Awards: Unknown"]
    assert data["datasets"][0]["backgroundColor"] == alpha(GREEN, 0.7)
    assert data["datasets"][1]["backgroundColor"] == alpha(RED, 0.7)
    assert data["datasets"][2]["backgroundColor"] == alpha(GRAY, 0.7)
    assert result["metadata"]["total_points"] == len(records)
    assert result["metadata"]["unknown_awards"] == 1

    assert data["scales"]["x"]["min"] == 0
    assert data["scales"]["x"]["max"] == 130.0
    assert data["scales"]["y"]["max"] == 80.0

    first = data["datasets"][0]["data"][0]
    assert first == {
        "x": 100.0,
        "y": 50.0,
        "awards": "Yes",
        "tooltip": "Alpha - Length: 100, Popularity: 50, Awards: Yes",
    }


def test_scatter_omits_unknown_dataset_when_all_awards_known(engine, records) -> None:
    known = records[records["Awards"] != ""]

    result = engine.process_chart("LengthPopularityScatter", known)

    assert [d["label"] for d in result["data"]["datasets"]] == ["Awards: Yes", "Awards: No"]


def test_empty_records_give_empty_result(engine) -> None:
    empty = pd.DataFrame(columns=["Year", "Length", "Popularity", "Subject", "Awards"])

    for name in ("PopularityLineChart", "SubjectBarChart", "LengthPopularityScatter"):
        result = engine.process_chart(name, empty)
        assert result["data"] is None
        assert result["metadata"]["empty"] is True


def test_unregistered_chart_gives_error_result(engine, records) -> None:
    result = engine.process_chart("PieChart", records)

    assert result["chart_type"] == "error"
    assert result["metadata"]["message"] == "Chart not registered"


def test_failing_chart_does_not_break_batch(engine, records, monkeypatch) -> None:
    def boom(self):
        raise RuntimeError("renderer exploded")

    monkeypatch.setattr(SubjectBarChart, "process", boom)

    results = engine.process_charts(
        ["PopularityLineChart", "SubjectBarChart", "LengthPopularityScatter"], records,
    )

    assert [r["chart_type"] for r in results] == ["line", "error", "scatter"]
    assert results[1]["metadata"]["message"] == "renderer exploded"


def test_render_context_is_scoped_and_sized(records) -> None:
    from film_app.config.chart_registry import CHART_REGISTRY

    ctx = ChartEngine.build_context(
        "SubjectBarChart", CHART_REGISTRY["SubjectBarChart"], records,
    )

    assert list(ctx.records.columns) == ["Subject"]
    assert ctx.layout.margin["bottom"] == 100
    assert ctx.layout.inner_width == ctx.layout.width - 90
    assert ctx.layout.inner_height == ctx.layout.height - 140


def test_class_to_module() -> None:
    assert ChartEngine._class_to_module("LengthPopularityScatter") == "length_popularity_scatter"


def test_scale_helpers() -> None:
    assert extent([3, 1, 2]) == (1.0, 3.0)
    assert extent([]) is None
    assert zero_based([5, 9]) == (0.0, 9.0)
    assert AWARDS_PALETTE("Yes") == GREEN
    assert AWARDS_PALETTE("No") == RED
    assert AWARDS_PALETTE("maybe") == GRAY
    assert AWARDS_PALETTE(None) == GRAY
    assert AWARDS_PALETTE.category(" Yes ") == "Yes"
