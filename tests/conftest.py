"""Shared fixtures: a small film CSV and a loaded dataset cache."""

from __future__ import annotations

import io
from pathlib import Path

import pandas as pd
import pytest

from film_app.core.cache import dataset_cache
from film_app.services.data.loader import load_dataset, parse_rows
from film_app.services.orchestrator import panel_controller

SAMPLE_CSV = """Year,Length,Title,Subject,Popularity,Awards
2000,100,Alpha,Comedy,50,Yes
2000,120,Beta,Drama,70,No
2001,90,Gamma,Comedy,40,No
2002,130,Delta,Horror,80,Yes
2002,95,Epsilon,Comedy,60,
"""

SHIPPED_DATASET = Path(__file__).resolve().parent.parent / "data" / "a1-film.csv"


@pytest.fixture
def sample_csv(tmp_path: Path) -> Path:
    path = tmp_path / "films.csv"
    path.write_text(SAMPLE_CSV, encoding="utf-8")
    return path


@pytest.fixture
def records() -> pd.DataFrame:
    raw = pd.read_csv(io.StringIO(SAMPLE_CSV), dtype=str, keep_default_na=False)
    return parse_rows(raw).records


@pytest.fixture
def loaded_dataset(sample_csv: Path):
    result = load_dataset(sample_csv)
    dataset_cache.set_result(result)
    panel_controller.reset()
    yield result
    dataset_cache.clear()
    panel_controller.reset()


@pytest.fixture
def no_dataset():
    dataset_cache.clear()
    panel_controller.reset()
    yield
    dataset_cache.clear()


@pytest.fixture
def shipped_dataset() -> Path:
    return SHIPPED_DATASET
