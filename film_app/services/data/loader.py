"""
Dataset loader — CSV rows → validated film records.

Single Responsibility: read the CSV source, coerce the three numeric
fields and split the rows into accepted records and rejected rows.

Every cell is read as a string so that ``Subject`` and ``Awards`` pass
through untouched.  A row is rejected (with a reason) when ``Year``,
``Length`` or ``Popularity`` is missing or not a finite number, or when
``Year`` is not a whole number (or too large for int64).  A line with
more fields than the header is rejected too, instead of failing the
whole load.  Nothing downstream ever sees a NaN.

Usage::

    from film_app.services.data.loader import load_dataset

    result = load_dataset("data/a1-film.csv")
    result.records       # pd.DataFrame of accepted rows
    result.rejected      # list[RejectedRow]
"""

from __future__ import annotations

import asyncio
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, IO, List, Union

import pandas as pd

from film_app.core.exceptions import DatasetLoadError, DatasetSchemaError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("Year", "Length", "Popularity", "Subject", "Awards")
NUMERIC_COLUMNS = ("Year", "Length", "Popularity")

_DELIMITERS = (",", ";")

# Years must survive the cast to int64.
_YEAR_LIMIT = float(2 ** 63)

_BAD_LINE_MARKER = "\x00bad-line:"

Source = Union[str, Path, IO[str]]


@dataclass(frozen=True)
class RejectedRow:
    """A source row that failed numeric validation."""
    row_number: int
    reason: str
    raw: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "row_number": self.row_number,
            "reason": self.reason,
            "raw": dict(self.raw),
        }


@dataclass
class LoadResult:
    """
    Outcome of one dataset load.

    ``records`` keeps the source column order; ``Year`` is int64,
    ``Length`` and ``Popularity`` are float64, everything else is str.
    """
    records: pd.DataFrame
    rejected: List[RejectedRow] = field(default_factory=list)
    source: str = ""

    @property
    def total_rows(self) -> int:
        return len(self.records) + len(self.rejected)

    @property
    def accepted(self) -> int:
        return len(self.records)

    @property
    def has_rejections(self) -> bool:
        return bool(self.rejected)


# ── Public API ───────────────────────────────────────────────────

def load_dataset(source: Source) -> LoadResult:
    """
    Read and validate a film CSV.

    Raises:
        DatasetLoadError:   the source cannot be read or parsed.
        DatasetSchemaError: a required column is missing from the header.
    """
    label = _source_label(source)
    raw = read_rows(source)
    result = parse_rows(raw, source=label)

    logger.info(
        f"[Loader] {label}: {result.accepted} records accepted, "
        f"{len(result.rejected)} rejected"
    )
    if result.rejected:
        preview = "; ".join(
            f"row {r.row_number}: {r.reason}" for r in result.rejected[:5]
        )
        logger.warning(f"[Loader] Rejected rows in {label}: {preview}")

    return result


async def load_dataset_async(source: Source) -> LoadResult:
    """Run :func:`load_dataset` in a worker thread."""
    return await asyncio.to_thread(load_dataset, source)


def read_rows(source: Source) -> pd.DataFrame:
    """
    Read the CSV into a string-only DataFrame.

    The delimiter (``,`` or ``;``) is detected from the header line.
    """
    text = _read_text(source)
    if not text.strip():
        raise DatasetLoadError(f"{_source_label(source)} is empty")

    delimiter = detect_delimiter(text.splitlines()[0])
    bad_lines: List[List[str]] = []

    def keep_bad_line(fields: List[str]) -> List[str]:
        # Hold the row's position with a marker; parse_rows rejects it.
        bad_lines.append(fields)
        return [f"{_BAD_LINE_MARKER}{len(bad_lines) - 1}"]

    try:
        raw = pd.read_csv(
            io.StringIO(text),
            sep=delimiter,
            dtype=str,
            keep_default_na=False,
            engine="python",
            on_bad_lines=keep_bad_line,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise DatasetLoadError(
            f"Cannot parse {_source_label(source)}: {exc}"
        ) from exc

    raw.columns = [str(c).strip() for c in raw.columns]
    missing = [c for c in REQUIRED_COLUMNS if c not in raw.columns]
    if missing:
        raise DatasetSchemaError(missing)

    # Short rows are padded with NaN; treat those cells as empty.
    raw = raw.fillna("")
    raw.attrs["bad_lines"] = bad_lines
    return raw


def parse_rows(raw: pd.DataFrame, source: str = "") -> LoadResult:
    """
    Coerce numeric fields and split accepted rows from rejected ones.

    Rows that ``read_rows`` marked as having too many fields are
    rejected as well, in their original position.
    """
    bad_lines: List[List[str]] = raw.attrs.get("bad_lines", [])
    raw = raw.reset_index(drop=True)
    columns = [str(c) for c in raw.columns]
    malformed = raw[columns[0]].astype(str).str.startswith(_BAD_LINE_MARKER)
    parsed = _coerce_numeric(raw)

    invalid = parsed.isna().any(axis=1) | malformed
    for col in NUMERIC_COLUMNS:
        invalid |= parsed[col].abs() == float("inf")
    invalid |= parsed["Year"].abs() >= _YEAR_LIMIT
    invalid |= (parsed["Year"] % 1) != 0
    invalid = invalid.astype(bool)

    rejected: List[RejectedRow] = []
    for idx in raw.index[invalid.to_numpy()]:
        raw_row = raw.loc[idx]
        if malformed.loc[idx]:
            marker = str(raw_row[columns[0]])
            fields = bad_lines[int(marker[len(_BAD_LINE_MARKER):])]
            rejected.append(_malformed_row(int(idx) + 1, fields, columns))
            continue
        rejected.append(
            RejectedRow(
                row_number=int(idx) + 1,
                reason="; ".join(_row_problems(raw_row, parsed.loc[idx])),
                raw={str(k): str(v) for k, v in raw_row.items()},
            )
        )

    records = raw.loc[~invalid].copy()
    records["Year"] = parsed.loc[~invalid, "Year"].astype("int64")
    records["Length"] = parsed.loc[~invalid, "Length"].astype("float64")
    records["Popularity"] = parsed.loc[~invalid, "Popularity"].astype("float64")
    records = records.reset_index(drop=True)

    return LoadResult(records=records, rejected=rejected, source=source)


def detect_delimiter(header_line: str) -> str:
    """Pick the delimiter that splits the header into the most fields."""
    return max(_DELIMITERS, key=header_line.count)


# ── Private helpers ──────────────────────────────────────────────

def _coerce_numeric(raw: pd.DataFrame) -> pd.DataFrame:
    parsed = pd.DataFrame(index=raw.index)
    for col in NUMERIC_COLUMNS:
        parsed[col] = pd.to_numeric(raw[col].str.strip(), errors="coerce").astype("float64")
    return parsed


def _row_problems(raw_row: pd.Series, parsed_row: pd.Series) -> List[str]:
    """Human-readable reasons for one invalid row."""
    problems: List[str] = []
    for col in NUMERIC_COLUMNS:
        value = str(raw_row[col]).strip()
        number = parsed_row[col]
        if not value:
            problems.append(f"{col} is missing")
        elif pd.isna(number) or abs(number) == float("inf"):
            problems.append(f"{col} '{value}' is not a number")
        elif col == "Year" and abs(number) >= _YEAR_LIMIT:
            problems.append(f"Year '{value}' is out of range")
        elif col == "Year" and number % 1 != 0:
            problems.append(f"Year '{value}' is not a whole number")
    return problems


def _malformed_row(row_number: int, fields: List[str], columns: List[str]) -> RejectedRow:
    raw = {col: value for col, value in zip(columns, fields)}
    for i, value in enumerate(fields[len(columns):], start=1):
        raw[f"extra_{i}"] = value
    return RejectedRow(
        row_number=row_number,
        reason=f"expected {len(columns)} fields, saw {len(fields)}",
        raw=raw,
    )


def _read_text(source: Source) -> str:
    if hasattr(source, "read"):
        content = source.read()
        if isinstance(content, bytes):
            content = content.decode("utf-8-sig")
        return content.lstrip("\ufeff")

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise DatasetLoadError(f"Dataset file not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DatasetLoadError(f"Cannot read dataset {path}: {exc}") from exc


def _source_label(source: Source) -> str:
    if hasattr(source, "read"):
        return getattr(source, "name", "<stream>")
    return str(source)
