"""
DatasetContext — Read-only data container for one chart request.

Holds the loaded records, the rejected rows and the chart names
resolved for the request.  Created once by ``ChartOrchestrator``,
then consumed read-only by ``ChartEngine`` and ``ResponseAssembler``.
"""

from __future__ import annotations

from typing import List

import pandas as pd

from film_app.services.data.loader import LoadResult, RejectedRow


class DatasetContext:
    """
    All data + metadata needed to render charts for one request.

    Attributes:
        records:     Validated film records.
        rejected:    Rows the loader refused, with reasons.
        source:      Path (or stream name) the dataset came from.
        chart_names: Class names of charts to render.
    """

    __slots__ = ("records", "rejected", "source", "chart_names")

    def __init__(self, load_result: LoadResult, chart_names: List[str]):
        self.records: pd.DataFrame = load_result.records
        self.rejected: List[RejectedRow] = load_result.rejected
        self.source: str = load_result.source
        self.chart_names = chart_names

    # ── Read-only helpers ────────────────────────────────────

    @property
    def has_records(self) -> bool:
        return not self.records.empty

    @property
    def total_records(self) -> int:
        return len(self.records)

    @property
    def total_rejected(self) -> int:
        return len(self.rejected)
