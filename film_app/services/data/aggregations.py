"""
Aggregations — derived series computed from the film records.

Both reductions are plain pandas group-bys:

  yearly_average  : mean Popularity per Year, ascending by year.
  subject_counts  : number of films per Subject, descending by count.
                    Ties keep the order in which subjects first appear.

Series are recomputed on every call; nothing is cached here.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

import pandas as pd

from film_app.core.exceptions import UnknownSeriesError


def yearly_average(records: pd.DataFrame) -> List[Dict[str, Any]]:
    """One ``{year, popularity}`` entry per distinct year."""
    if records.empty:
        return []

    means = records.groupby("Year", sort=True)["Popularity"].mean()
    return [
        {"year": int(year), "popularity": float(popularity)}
        for year, popularity in means.items()
    ]


def yearly_film_counts(records: pd.DataFrame) -> Dict[int, int]:
    """Number of films per year (tooltip detail for the line chart)."""
    if records.empty:
        return {}
    sizes = records.groupby("Year", sort=True).size()
    return {int(year): int(n) for year, n in sizes.items()}


def subject_counts(records: pd.DataFrame) -> List[Dict[str, Any]]:
    """One ``{subject, count}`` entry per distinct subject."""
    if records.empty:
        return []

    counts = (
        records.groupby("Subject", sort=False)
        .size()
        .sort_values(ascending=False, kind="stable")
    )
    return [
        {"subject": str(subject), "count": int(count)}
        for subject, count in counts.items()
    ]


# ── Series registry (used by the dataset API and export) ─────────

SERIES_BUILDERS: Dict[str, Callable[[pd.DataFrame], List[Dict[str, Any]]]] = {
    "yearly-average": yearly_average,
    "subject-counts": subject_counts,
}


def build_series(name: str, records: pd.DataFrame) -> List[Dict[str, Any]]:
    """Compute a registered series by name."""
    builder = SERIES_BUILDERS.get(name)
    if builder is None:
        raise UnknownSeriesError(name)
    return builder(records)
