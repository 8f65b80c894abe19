"""Chart: Number of films per subject — bar chart, most frequent first."""

from __future__ import annotations

from film_app.services.charts.base import BaseChart, ChartResult
from film_app.services.charts.scales import (
    DARKORANGE,
    band_axis,
    band_percentages,
    linear_axis,
    zero_based,
)
from film_app.services.data.aggregations import subject_counts


class SubjectBarChart(BaseChart):

    def process(self) -> ChartResult:
        df = self.df
        if df.empty or "Subject" not in df.columns:
            return self._empty("bar")

        series = subject_counts(df)
        labels = [row["subject"] for row in series]
        counts = [row["count"] for row in series]

        return self._result(
            "bar",
            {
                "labels": labels,
                "datasets": [
                    {
                        "label": "Films",
                        "data": counts,
                        "backgroundColor": self.config.get("fill", DARKORANGE),
                        "tooltips": [f"{s}: {c} films" for s, c in zip(labels, counts)],
                        **band_percentages(self.config.get("padding", 0.2)),
                    }
                ],
                "scales": {
                    "x": band_axis(
                        labels, "Subject",
                        label_rotation=self.config.get("label_rotation", -40),
                    ),
                    "y": linear_axis(zero_based(counts), "Films", integer_ticks=True),
                },
            },
            total_points=len(series),
            total_films=sum(counts),
        )
