"""
Chart: Average popularity per year — line chart.

X = year (linear, data extent, integer ticks), Y = mean popularity
(linear, zero to max).  Connected line plus one point per year.
"""

from __future__ import annotations

from film_app.services.charts.base import BaseChart, ChartResult
from film_app.services.charts.scales import STEELBLUE, extent, linear_axis, zero_based
from film_app.services.data.aggregations import yearly_average, yearly_film_counts


class PopularityLineChart(BaseChart):

    def process(self) -> ChartResult:
        df = self.df
        if df.empty:
            return self._empty("line")

        series = yearly_average(df)
        films = yearly_film_counts(df)
        color = self.config.get("stroke", STEELBLUE)

        points = [
            {
                "x": row["year"],
                "y": row["popularity"],
                "films": films.get(row["year"], 0),
                "tooltip": (
                    f"{row['year']}: {row['popularity']:.2f} avg popularity "
                    f"({films.get(row['year'], 0)} films)"
                ),
            }
            for row in series
        ]

        return self._result(
            "line",
            {
                "datasets": [
                    {
                        "label": "Average popularity",
                        "data": points,
                        "borderColor": color,
                        "backgroundColor": color,
                        "borderWidth": self.config.get("stroke_width", 2),
                        "pointRadius": self.config.get("point_radius", 3),
                        "fill": False,
                        "tension": 0,
                    }
                ],
                "scales": {
                    "x": linear_axis(
                        extent(r["year"] for r in series), "Year", integer_ticks=True,
                    ),
                    "y": linear_axis(
                        zero_based(r["popularity"] for r in series), "Popularity",
                    ),
                },
            },
            total_points=len(points),
        )
