"""
Chart: Scatter — film length vs popularity.

Each record becomes a point:
  X = Length (zero to max), Y = Popularity (zero to max).
  Colored by Awards (green = Yes, red = No, gray = anything else).
"""

from __future__ import annotations

from typing import Any, Dict, List

from film_app.services.charts.base import BaseChart, ChartResult
from film_app.services.charts.scales import AWARDS_PALETTE, alpha, linear_axis, zero_based


class LengthPopularityScatter(BaseChart):

    def process(self) -> ChartResult:
        df = self.df
        if df.empty:
            return self._empty("scatter")

        opacity = self.config.get("opacity", 0.7)
        radius = self.config.get("point_radius", 5)
        has_title = "Title" in df.columns

        groups: Dict[str, List[Dict[str, Any]]] = {
            cat: [] for cat in AWARDS_PALETTE.categories()
        }

        for row in df.itertuples(index=False):
            category = AWARDS_PALETTE.category(row.Awards)
            title = row.Title if has_title else ""
            groups[category].append({
                "x": float(row.Length),
                "y": float(row.Popularity),
                "awards": category,
                "tooltip": _tooltip(title, row.Length, row.Popularity, category),
            })

        datasets: List[Dict[str, Any]] = []
        for category, points in groups.items():
            if not points:
                continue
            color = AWARDS_PALETTE(category)
            datasets.append({
                "label": f"Awards: {category}",
                "data": points,
                "backgroundColor": alpha(color, opacity),
                "borderColor": alpha(color, opacity),
                "pointRadius": radius,
            })

        return self._result(
            "scatter",
            {
                "datasets": datasets,
                "scales": {
                    "x": linear_axis(zero_based(df["Length"]), "Length"),
                    "y": linear_axis(zero_based(df["Popularity"]), "Popularity"),
                },
            },
            total_points=sum(len(p) for p in groups.values()),
            unknown_awards=len(groups[AWARDS_PALETTE.unknown_label]),
        )


def _tooltip(title: Any, length: float, popularity: float, awards: str) -> str:
    head = f"{title} - " if isinstance(title, str) and title.strip() else ""
    return f"{head}Length: {length:g}, Popularity: {popularity:g}, Awards: {awards}"
