"""Tests for the FastAPI endpoints (dataset cache populated by fixtures)."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from film_app.core.config import settings
from film_app.main import app

client = TestClient(app)


def test_health_reports_loaded_dataset(loaded_dataset) -> None:
    resp = client.get("/api/v1/system/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["dataset_loaded"] is True
    assert body["records"] == 5
    assert body["rejected"] == 0


def test_health_reports_missing_dataset(no_dataset) -> None:
    body = client.get("/api/v1/system/health").json()

    assert body["status"] == "degraded"
    assert body["dataset_loaded"] is False


@pytest.mark.parametrize(
    "path",
    ["/api/v1/charts/", "/api/v1/charts/SubjectBarChart", "/api/v1/dataset/summary"],
)
def test_endpoints_return_503_without_dataset(no_dataset, path) -> None:
    assert client.get(path).status_code == 503


def test_all_charts(loaded_dataset) -> None:
    body = client.get("/api/v1/charts/").json()

    assert set(body["charts"]) == {"1", "2", "3"}
    assert body["metadata"]["chart_count"] == 3
    assert body["metadata"]["total_records"] == 5
    assert body["charts"]["2"]["data"]["labels"] == ["Comedy", "Drama", "Horror"]


def test_charts_subset_and_unknown(loaded_dataset) -> None:
    body = client.get("/api/v1/charts/", params={"names": "PopularityLineChart"}).json()
    assert list(body["charts"]) == ["1"]

    resp = client.get("/api/v1/charts/", params={"names": "PieChart"})
    assert resp.status_code == 404


def test_one_chart(loaded_dataset) -> None:
    body = client.get("/api/v1/charts/LengthPopularityScatter").json()

    assert body["chart_type"] == "scatter"
    assert body["metadata"]["total_points"] == 5
    assert client.get("/api/v1/charts/PieChart").status_code == 404


def test_dataset_summary(loaded_dataset) -> None:
    body = client.get("/api/v1/dataset/summary").json()

    assert body["records"] == 5
    assert body["total_rows"] == 5
    assert body["extents"]["Year"] == {"min": 2000.0, "max": 2002.0}
    assert body["extents"]["Popularity"] == {"min": 40.0, "max": 80.0}
    assert body["subjects"] == 3
    assert body["years"] == 3


def test_dataset_rejected_rows(tmp_path) -> None:
    from film_app.core.cache import dataset_cache
    from film_app.services.data.loader import load_dataset

    path = tmp_path / "bad.csv"
    path.write_text(
        "Year,Length,Popularity,Subject,Awards\n2000,100,50,Comedy,Yes\n2001,x,40,Drama,No\n",
        encoding="utf-8",
    )
    dataset_cache.set_result(load_dataset(path))
    try:
        body = client.get("/api/v1/dataset/rejected").json()
    finally:
        dataset_cache.clear()

    assert body == [
        {
            "row_number": 2,
            "reason": "Length 'x' is not a number",
            "raw": {"Year": "2001", "Length": "x", "Popularity": "40", "Subject": "Drama", "Awards": "No"},
        }
    ]


def test_series_endpoints(loaded_dataset) -> None:
    body = client.get("/api/v1/dataset/series/yearly-average").json()
    assert body["rows"][0] == {"year": 2000, "popularity": 60.0}

    assert client.get("/api/v1/dataset/series/nope").status_code == 404
    assert client.get("/api/v1/dataset/series").json() == ["yearly-average", "subject-counts"]


def test_series_export(loaded_dataset) -> None:
    resp = client.get("/api/v1/dataset/series/subject-counts/export", params={"fmt": "csv"})
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert resp.text.splitlines() == ["subject,count", "Comedy,3", "Drama,1", "Horror,1"]

    xlsx = client.get("/api/v1/dataset/series/subject-counts/export", params={"fmt": "xlsx"})
    assert xlsx.status_code == 200
    assert xlsx.content[:2] == b"PK"

    bad = client.get("/api/v1/dataset/series/subject-counts/export", params={"fmt": "pdf"})
    assert bad.status_code == 400


def test_panel_selection_is_idempotent(loaded_dataset) -> None:
    first = client.post("/api/v1/panels/task1/select").json()
    second = client.post("/api/v1/panels/task1/select").json()

    assert first["already_rendered"] is False
    assert second["already_rendered"] is True
    assert second["chart"] == first["chart"]

    panels = client.get("/api/v1/panels/").json()
    assert panels["visible"] == "task1"
    assert [p["rendered"] for p in panels["panels"]] == [True, False, False]

    assert client.post("/api/v1/panels/task7/select").status_code == 404


def test_dataset_reload(loaded_dataset, sample_csv, tmp_path, monkeypatch) -> None:
    client.post("/api/v1/panels/task1/select")
    monkeypatch.setattr(settings, "DATASET_PATH", str(sample_csv))

    ok = client.post("/api/v1/system/dataset/reload")
    assert ok.status_code == 200
    assert ok.json()["records"] == 5
    assert ok.json()["source"] == str(sample_csv)
    panels = client.get("/api/v1/panels/").json()["panels"]
    assert not any(p["rendered"] for p in panels)

    monkeypatch.setattr(settings, "DATASET_PATH", str(tmp_path / "gone.csv"))
    missing = client.post("/api/v1/system/dataset/reload")
    assert missing.status_code == 503
    # previous dataset stays available after a failed reload
    assert client.get("/api/v1/system/health").json()["dataset_loaded"] is True


def test_dataset_reload_ignores_path_parameter(loaded_dataset, tmp_path, monkeypatch) -> None:
    other = tmp_path / "other.csv"
    other.write_text("Year,Length,Popularity,Subject,Awards\n1990,1,1,Secret,No\n", encoding="utf-8")
    monkeypatch.setattr(settings, "DATASET_PATH", str(loaded_dataset.source))

    resp = client.post("/api/v1/system/dataset/reload", params={"path": str(other)})

    assert resp.status_code == 200
    assert resp.json()["source"] == loaded_dataset.source
    assert resp.json()["records"] == 5


def test_startup_with_missing_dataset_reports_degraded(no_dataset, tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(settings, "DATASET_PATH", str(tmp_path / "missing.csv"))

    with TestClient(app) as started:
        body = started.get("/api/v1/system/health").json()
        charts = started.get("/api/v1/charts/")

    assert body["status"] == "degraded"
    assert body["dataset_loaded"] is False
    assert "Dataset file not found" in body["error"]
    assert charts.status_code == 503


def test_startup_loads_configured_dataset(no_dataset, sample_csv, monkeypatch) -> None:
    monkeypatch.setattr(settings, "DATASET_PATH", str(sample_csv))

    with TestClient(app) as started:
        body = started.get("/api/v1/system/health").json()

    assert body["status"] == "ok"
    assert body["records"] == 5
