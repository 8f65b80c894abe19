"""
Scale and palette helpers shared by the chart types.

Axis domains are computed here and handed to Chart.js as explicit
``min``/``max`` (linear) or ``labels`` (band / category) so the browser
draws exactly the extents the data calls for.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

import pandas as pd


# ── Colours ──────────────────────────────────────────────────────

STEELBLUE = "#4682b4"
DARKORANGE = "#ff8c00"
GREEN = "#008000"
RED = "#ff0000"
GRAY = "#808080"


def alpha(hex_color: str, a: float = 0.15) -> str:
    """Convert '#RRGGBB' → 'rgba(r,g,b,a)'."""
    h = hex_color.lstrip("#")
    if len(h) != 6:
        return f"rgba(100,100,100,{a})"
    r, g, b = int(h[:2], 16), int(h[2:4], 16), int(h[4:6], 16)
    return f"rgba({r},{g},{b},{a})"


class OrdinalPalette:
    """
    Categorical colour scale with a fixed domain.

    Values outside the domain map to ``unknown_label`` / ``unknown_color``.
    """

    def __init__(
        self,
        domain: Sequence[str],
        colors: Sequence[str],
        unknown_label: str = "Unknown",
        unknown_color: str = GRAY,
    ) -> None:
        if len(domain) != len(colors):
            raise ValueError("domain and colors must have the same length")
        self.domain = list(domain)
        self._colors = dict(zip(domain, colors))
        self.unknown_label = unknown_label
        self.unknown_color = unknown_color

    def category(self, value: Any) -> str:
        key = "" if value is None or pd.isna(value) else str(value).strip()
        return key if key in self._colors else self.unknown_label

    def __call__(self, value: Any) -> str:
        return self._colors.get(self.category(value), self.unknown_color)

    def categories(self) -> List[str]:
        return self.domain + [self.unknown_label]


AWARDS_PALETTE = OrdinalPalette(["Yes", "No"], [GREEN, RED])


# ── Domains ──────────────────────────────────────────────────────

def extent(values: Iterable[float]) -> Optional[Tuple[float, float]]:
    """``(min, max)`` of the values, or None when there are none."""
    series = pd.Series(list(values), dtype="float64").dropna()
    if series.empty:
        return None
    return float(series.min()), float(series.max())


def zero_based(values: Iterable[float]) -> Optional[Tuple[float, float]]:
    """``(0, max)`` of the values, or None when there are none."""
    ext = extent(values)
    if ext is None:
        return None
    return 0.0, ext[1]


# ── Chart.js axis builders ───────────────────────────────────────

def linear_axis(
    domain: Optional[Tuple[float, float]],
    title: str,
    integer_ticks: bool = False,
) -> Dict[str, Any]:
    """Linear axis spanning ``domain`` exactly."""
    axis: Dict[str, Any] = {
        "type": "linear",
        "title": {"display": True, "text": title},
        "ticks": {},
    }
    if domain is not None:
        axis["min"], axis["max"] = domain
    if integer_ticks:
        axis["ticks"] = {"precision": 0, "format": "d"}
    return axis


def band_axis(
    labels: Sequence[str],
    title: str,
    label_rotation: int = -40,
) -> Dict[str, Any]:
    """Category axis over ``labels`` in the given order."""
    angle = abs(label_rotation)
    return {
        "type": "category",
        "labels": list(labels),
        "title": {"display": True, "text": title},
        "ticks": {"autoSkip": False, "minRotation": angle, "maxRotation": angle},
    }


def band_percentages(padding: float) -> Dict[str, float]:
    """Chart.js bar sizing equivalent to a band scale with ``padding``."""
    return {"categoryPercentage": round(1.0 - padding, 4), "barPercentage": 1.0}
