"""
Chart Registry Configuration.

Maps chart class names to their runtime metadata. This file is the ONLY
place where you register a new chart; the rest of the system discovers
it automatically via the Registry Pattern.

Keys:
  class_name → str : must match a class in film_app/services/charts/types/.

Values: dict with:
  chart_id         → int       : stable numeric id used in API responses.
  display_name     → str       : chart title.
  chart_type       → str       : "line" | "bar" | "scatter".
  required_columns → list[str] : record columns this chart reads (Data Scoping).
  default_config   → dict      : margins and mark styling.

To add a new chart:
  1. Create the chart class in film_app/services/charts/types/
  2. Add an entry here (and a panel in PANEL_RENDER_MAP to show it).
"""

CHART_REGISTRY: dict[str, dict] = {
    "PopularityLineChart": {
        "chart_id": 1,
        "display_name": "Average Film Popularity Over Years",
        "chart_type": "line",
        "required_columns": ["Year", "Popularity"],
        "default_config": {
            "margin": {"top": 40, "right": 30, "bottom": 40, "left": 60},
            "stroke": "#4682b4",          # steelblue
            "stroke_width": 2,
            "point_radius": 3,
        },
    },
    "SubjectBarChart": {
        "chart_id": 2,
        "display_name": "Number of Films per Genre",
        "chart_type": "bar",
        "required_columns": ["Subject"],
        "default_config": {
            "margin": {"top": 40, "right": 30, "bottom": 100, "left": 60},
            "fill": "#ff8c00",            # darkorange
            "padding": 0.2,
            "label_rotation": -40,
        },
    },
    "LengthPopularityScatter": {
        "chart_id": 3,
        "display_name": "Film Length vs Popularity (Green = Awards)",
        "chart_type": "scatter",
        "required_columns": ["Length", "Popularity", "Awards", "Title"],
        "default_config": {
            "margin": {"top": 40, "right": 30, "bottom": 50, "left": 60},
            "point_radius": 5,
            "opacity": 0.7,
        },
    },
}


# ── Frontend panel configuration ────────────────────────────────
#
# One tab button + one panel per entry; exactly one panel is visible.
#
#   chart      → CHART_REGISTRY key rendered inside the panel.
#   label      → tab button text.
#   element_id → DOM id of the panel's chart container.
#   order      → tab order (the lowest is selected on page load).

PANEL_RENDER_MAP: dict[str, dict] = {
    "task1": {"chart": "PopularityLineChart",     "label": "Line Chart",    "element_id": "line-chart",   "order": 1},
    "task2": {"chart": "SubjectBarChart",         "label": "Bar Chart",     "element_id": "bar-chart",    "order": 2},
    "task3": {"chart": "LengthPopularityScatter", "label": "Scatter Plot",  "element_id": "scatter-plot", "order": 3},
}


def ordered_panels() -> list[tuple[str, dict]]:
    """Panels sorted by their ``order`` key."""
    return sorted(PANEL_RENDER_MAP.items(), key=lambda item: item[1]["order"])
