"""
ChartWorkspace — state held between user actions.

Holds the current dataset, axis selection and chart kind. Mutated only
by ``ChartOrchestrator``; every mutation is validated before it is
applied so a failed action leaves the workspace unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from chartdeck.services.charts.base import AxisSelection, ChartKind
from chartdeck.services.data.dataset import TabularDataSet


@dataclass
class ChartWorkspace:
    """
    Attributes:
        dataset:   Latest successfully ingested upload (or None).
        selection: Current (x, y) column choice.
        kind:      Current chart kind.
    """
    dataset: Optional[TabularDataSet] = None
    selection: AxisSelection = field(default_factory=AxisSelection)
    kind: ChartKind = ChartKind.BAR

    # ── Read-only helpers ────────────────────────────────────

    @property
    def has_dataset(self) -> bool:
        return self.dataset is not None

    @property
    def total_rows(self) -> int:
        return len(self.dataset) if self.dataset is not None else 0

    def summary(self) -> Dict[str, Any]:
        return {
            "has_dataset": self.has_dataset,
            "columns": list(self.dataset.columns) if self.dataset else [],
            "total_rows": self.total_rows,
            "x_column": self.selection.x_column,
            "y_column": self.selection.y_column,
            "kind": self.kind.value,
        }
