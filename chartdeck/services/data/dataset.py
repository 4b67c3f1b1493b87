"""
TabularDataSet — validated, immutable in-memory upload.

Single Responsibility: turn the ingestion service's
``{headers, rows}`` payload (or a pandas DataFrame) into an
all-or-nothing validated structure.

Invariants:
  - column names are unique; their order is the display order.
  - every row has exactly the column names as keys.
  - row order is the ingestion order (the fallback ordering).
  - the structure never changes after ``ingest``; a new upload
    produces a new dataset.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from chartdeck.core.exceptions import SchemaError
from chartdeck.services.data.cells import Cell, Number, classify
from chartdeck.services.data.coercion import is_numeric, to_comparable

logger = logging.getLogger(__name__)

Row = Mapping[str, Any]
CellRow = Mapping[str, Cell]


@dataclass(frozen=True)
class TabularDataSet:
    """
    Attributes:
        columns: Column names in display order.
        rows:    Raw values as ingested (preview, export).
        cells:   The same rows classified into ``Cell`` values; the
                 chart pipeline reads these and never the raw values.
    """
    columns: Tuple[str, ...]
    rows: Tuple[Row, ...]
    cells: Tuple[CellRow, ...]

    # ── Construction ─────────────────────────────────────────────

    @classmethod
    def ingest(
        cls,
        columns: Sequence[str],
        rows: Iterable[Mapping[str, Any]],
    ) -> "TabularDataSet":
        """
        Validate and freeze an uploaded table.

        Raises:
            SchemaError: duplicate/non-text column names, a row whose
                key set differs from the columns, or an unsupported
                cell value. Nothing is returned in that case.
        """
        cols = tuple(columns)
        for name in cols:
            if not isinstance(name, str):
                raise SchemaError(f"Column name {name!r} is not text")

        seen = set()
        duplicates = []
        for name in cols:
            if name in seen and name not in duplicates:
                duplicates.append(name)
            seen.add(name)
        if duplicates:
            raise SchemaError(f"Duplicate column names: {', '.join(duplicates)}")

        frozen: List[Row] = []
        classified: List[CellRow] = []
        for index, row in enumerate(rows):
            keys = set(row.keys())
            if keys != seen:
                missing = sorted(seen - keys)
                extra = sorted(str(k) for k in keys - seen)
                raise SchemaError(
                    f"Row {index} does not match the columns "
                    f"(missing: {missing}, unexpected: {extra})"
                )
            classified.append(MappingProxyType({name: classify(row[name]) for name in cols}))
            frozen.append(MappingProxyType({name: row[name] for name in cols}))

        logger.info(f"[TabularDataSet] Ingested {len(frozen)} rows x {len(cols)} columns")
        return cls(columns=cols, rows=tuple(frozen), cells=tuple(classified))

    @classmethod
    def from_frame(cls, df: pd.DataFrame) -> "TabularDataSet":
        """
        Ingest a DataFrame produced by a spreadsheet reader.

        Missing values (None, NaN, NaT, pd.NA) become blanks, numpy scalars become Python numbers and
        timestamps become ISO text.
        """
        columns = [str(c) for c in df.columns]
        records = [
            {name: _from_pandas(value) for name, value in zip(columns, values)}
            for values in df.itertuples(index=False, name=None)
        ]
        return cls.ingest(columns, records)

    # ── Accessors ────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def has_column(self, name: Optional[str]) -> bool:
        return name in self.columns

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame([dict(r) for r in self.rows], columns=list(self.columns))

    def preview(self, limit: int = 10) -> Dict[str, Any]:
        """First *limit* rows plus totals, for the data preview table."""
        limit = max(0, limit)
        # NaN/inf shown as text so the table stays JSON-serializable.
        shown = [
            {name: _preview_value(row[name], cells[name]) for name in self.columns}
            for row, cells in zip(self.rows[:limit], self.cells[:limit])
        ]
        return {
            "columns": list(self.columns),
            "rows": shown,
            "shown_rows": len(shown),
            "total_rows": len(self.rows),
            "truncated": len(self.rows) > limit,
        }


def _preview_value(raw: Any, cell: Cell) -> Any:
    if isinstance(cell, Number) and not is_numeric(cell):
        return to_comparable(cell)
    return raw


def _from_pandas(value: Any) -> Any:
    """Convert one DataFrame cell to an ingestion-contract value."""
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    if isinstance(value, (pd.Timestamp, datetime, date)):
        return value.isoformat()
    if isinstance(value, np.bool_):
        return str(bool(value)).lower()
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, np.integer):
        return int(value)
    if isinstance(value, np.floating):
        return float(value)
    if isinstance(value, (int, float, str)):
        return value
    return str(value)
