"""
SeriesBuilder — sorted label/value extraction for the chosen axes.

Pipeline:
  1. Check the axis selection against the dataset columns.
  2. Stable-sort a copy of the rows on the X column (RowComparator).
  3. label = X cell in its original type, value = ``to_number`` of the
     Y cell.

No rows are dropped or inserted: ``len(series) == len(dataset)``.
"""

from __future__ import annotations

import logging

from chartdeck.services.charts.base import AxisSelection, Label, Series, SeriesPoint
from chartdeck.services.charts.comparator import sort_rows
from chartdeck.services.data.cells import Cell, Number, Text
from chartdeck.services.data.coercion import is_numeric, to_comparable, to_number
from chartdeck.services.data.dataset import TabularDataSet

logger = logging.getLogger(__name__)


class SeriesBuilder:

    def build(self, dataset: TabularDataSet, selection: AxisSelection) -> Series:
        """
        Build the ordered series for *selection*.

        Raises:
            AxisNotSelectedError: an axis is unset or not a column.
        """
        selection.require(dataset.columns)
        x, y = selection.x_column, selection.y_column

        ordered = sort_rows(dataset.cells, x)
        points = tuple(
            SeriesPoint(label=_label(row[x]), value=to_number(row[y]))
            for row in ordered
        )
        logger.debug(f"[SeriesBuilder] {len(points)} points for ({x}, {y})")
        return Series(points=points)


def _label(cell: Cell) -> Label:
    # Labels keep their original type; blanks and NaN/inf display as text.
    if isinstance(cell, Text):
        return cell.value
    if isinstance(cell, Number) and is_numeric(cell):
        return cell.value
    return to_comparable(cell)
