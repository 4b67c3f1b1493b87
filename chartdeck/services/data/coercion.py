"""
ValueCoercion — the single translation boundary for cell values.

  is_numeric(v)    : finite number, or text that parses fully to a finite decimal.
  to_number(v)     : parsed value; ``0`` for blanks, non-numeric text and
                     NaN/inf numbers.
  to_comparable(v) : printable text form (labels + sort fallback).

Coercion is permissive on purpose: a malformed Y cell degrades to
zero instead of failing the whole chart.
"""

from __future__ import annotations

import math
import re
from typing import Any, Optional, Union

from chartdeck.services.data.cells import Cell, Empty, Number, Text, classify

# Plain decimal with optional exponent. No inf/nan, no underscores.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _as_cell(v: Any) -> Cell:
    if isinstance(v, (Number, Text, Empty)):
        return v
    return classify(v)


def _is_finite(value: Union[int, float]) -> bool:
    return isinstance(value, int) or math.isfinite(value)


def _parse_text(text: str) -> Optional[float]:
    stripped = text.strip()
    if not _DECIMAL_RE.fullmatch(stripped):
        return None
    parsed = float(stripped)
    return parsed if math.isfinite(parsed) else None


def is_numeric(v: Any) -> bool:
    cell = _as_cell(v)
    if isinstance(cell, Number):
        return _is_finite(cell.value)
    if isinstance(cell, Text):
        return _parse_text(cell.value) is not None
    return False


def to_number(v: Any) -> Union[int, float]:
    """Numeric value of *v*, or ``0`` when it has none."""
    cell = _as_cell(v)
    if isinstance(cell, Number):
        return cell.value if _is_finite(cell.value) else 0
    if isinstance(cell, Text):
        parsed = _parse_text(cell.value)
        if parsed is None:
            return 0
        return int(parsed) if parsed.is_integer() else parsed
    return 0


def to_comparable(v: Any) -> str:
    """Printable form: ``10.0`` → ``"10"``, blank → ``""``."""
    cell = _as_cell(v)
    if isinstance(cell, Number):
        value = cell.value
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(cell, Text):
        return cell.value
    return ""
