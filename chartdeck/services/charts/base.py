"""
Chart domain types.

Single Responsibility: the value objects that flow through the chart
pipeline. No behaviour beyond validation and serialization.

  ChartKind      : closed enumeration of the six supported chart kinds.
  AxisSelection  : the (x, y) column pair chosen by the user.
  SeriesPoint    : one (label, value) pair.
  Series         : ordered points produced by the SeriesBuilder.
  ChartArtifact  : fully assembled descriptor handed to the renderer.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from chartdeck.core.exceptions import AxisNotSelectedError, UnsupportedChartKindError

Label = Union[str, int, float]


class ChartKind(str, Enum):
    """Chart kinds understood by the rendering collaborator (Chart.js names)."""

    BAR = "bar"
    LINE = "line"
    PIE = "pie"
    DOUGHNUT = "doughnut"
    POLAR_AREA = "polarArea"
    RADAR = "radar"

    @classmethod
    def parse(cls, value: Union[str, "ChartKind"]) -> "ChartKind":
        """Resolve a raw kind name, raising ``UnsupportedChartKindError``."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedChartKindError(
                f"Unsupported chart kind '{value}'"
            ) from None


@dataclass(frozen=True)
class AxisSelection:
    """Column names for the label axis (x) and the magnitude axis (y)."""

    x_column: Optional[str] = None
    y_column: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.x_column) and bool(self.y_column)

    def require(self, columns: Tuple[str, ...]) -> None:
        """Fail unless both axes are set and name columns of the dataset."""
        if not self.is_complete:
            raise AxisNotSelectedError("Please select both X and Y axes")
        for axis, name in (("X", self.x_column), ("Y", self.y_column)):
            if name not in columns:
                raise AxisNotSelectedError(
                    f"{axis}-axis column '{name}' is not in the dataset"
                )


@dataclass(frozen=True)
class SeriesPoint:
    label: Label
    value: float


@dataclass(frozen=True)
class Series:
    """Ordered (label, value) pairs, one per dataset row."""

    points: Tuple[SeriesPoint, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    @property
    def labels(self) -> List[Label]:
        return [p.label for p in self.points]

    @property
    def values(self) -> List[float]:
        return [p.value for p in self.points]


@dataclass(frozen=True)
class ChartArtifact:
    """
    Render-ready chart descriptor.

    ``datasets`` and ``options`` are deep-copied on the way out so the
    artifact stays immutable once built.
    """

    kind: ChartKind
    title: str
    labels: Tuple[Label, ...]
    datasets: Tuple[Dict[str, Any], ...]
    options: Dict[str, Any] = field(default_factory=dict)

    def to_config(self) -> Dict[str, Any]:
        """Chart.js configuration object (``new Chart(ctx, config)``)."""
        return {
            "type": self.kind.value,
            "data": {
                "labels": list(self.labels),
                "datasets": copy.deepcopy(list(self.datasets)),
            },
            "options": copy.deepcopy(self.options),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "title": self.title, **self.to_config()}
