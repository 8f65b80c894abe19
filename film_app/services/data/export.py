"""
Export — derived series serialization to CSV and Excel.

Single Responsibility: convert a list of series rows to downloadable
byte formats.  No aggregation logic here.
"""

from __future__ import annotations

import io
from typing import Any, Dict, List

import pandas as pd

EXPORT_FORMATS = {
    "csv": "text/csv",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


def to_csv(rows: List[Dict[str, Any]]) -> str:
    """Export series rows to a CSV string."""
    if not rows:
        return ""
    return pd.DataFrame(rows).to_csv(index=False)


def to_excel_bytes(rows: List[Dict[str, Any]], sheet_name: str = "Series") -> bytes:
    """Export series rows to Excel bytes (xlsx)."""
    if not rows:
        return b""
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        pd.DataFrame(rows).to_excel(writer, index=False, sheet_name=sheet_name[:31])
    return buffer.getvalue()
