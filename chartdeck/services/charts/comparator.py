"""
RowComparator — total-order comparison of two rows on one column.

Each pair decides independently: numeric comparison when both cells
are numeric, otherwise code-point comparison of their text forms.
Columns mixing numbers and text therefore sort per pair, which can
be non-transitive (``1`` < ``"2"`` numerically, yet ``"2"`` and
``1`` both sort before ``"b"`` as text). That ordering is kept as is.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import List, Sequence

from chartdeck.services.data.coercion import is_numeric, to_comparable, to_number
from chartdeck.services.data.dataset import Row


def _sign(delta: float) -> int:
    return (delta > 0) - (delta < 0)


def compare_values(a, b) -> int:
    """-1, 0 or +1 for two raw cell values."""
    if is_numeric(a) and is_numeric(b):
        return _sign(to_number(a) - to_number(b))
    left, right = to_comparable(a), to_comparable(b)
    return (left > right) - (left < right)


def compare_rows(a: Row, b: Row, column: str) -> int:
    return compare_values(a[column], b[column])


def sort_rows(rows: Sequence[Row], column: str) -> List[Row]:
    """Ascending copy of *rows*; equal rows keep their ingestion order."""
    # sorted() is guaranteed stable.
    return sorted(rows, key=cmp_to_key(lambda a, b: compare_rows(a, b, column)))
