"""
ChartSpecBuilder — Series + ChartKind → ChartArtifact.

Single Responsibility: assemble the dataset shape dictated by the
kind's entry in ``CHART_KIND_REGISTRY``. No if/else on the kind:
colour arity, ``fill`` and the zero baseline all come from the policy.

Axis and emptiness checks happen upstream (SeriesBuilder).
"""

from __future__ import annotations

import logging
import random
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from chartdeck.config.chart_registry import (
    CHART_KIND_REGISTRY,
    ChartKindPolicy,
    PaletteMode,
)
from chartdeck.core.exceptions import UnsupportedChartKindError
from chartdeck.services.charts.base import ChartArtifact, ChartKind, Series
from chartdeck.services.charts.palette import PaletteGenerator, palette_for

logger = logging.getLogger(__name__)


class ChartSpecBuilder:
    """
    Policy-table driven artifact assembly.

    Args:
        registry:  Kind → policy table (defaults to ``CHART_KIND_REGISTRY``).
        rng:       Random source handed to randomized palettes.
        palettes:  Explicit strategy per palette mode (overrides *rng*).
    """

    def __init__(
        self,
        registry: Optional[Mapping[ChartKind, ChartKindPolicy]] = None,
        rng: Optional[random.Random] = None,
        palettes: Optional[Mapping[PaletteMode, PaletteGenerator]] = None,
    ) -> None:
        self.registry = registry if registry is not None else CHART_KIND_REGISTRY
        self._palettes: Dict[PaletteMode, PaletteGenerator] = dict(palettes or {})
        for mode in PaletteMode:
            self._palettes.setdefault(mode, palette_for(mode, rng))

    def policy_for(self, kind: Union[ChartKind, str]) -> ChartKindPolicy:
        try:
            parsed = ChartKind.parse(kind)
        except UnsupportedChartKindError:
            parsed = None
        policy = self.registry.get(parsed) if parsed is not None else None
        if policy is None:
            raise UnsupportedChartKindError(f"Unsupported chart kind '{_name(kind)}'")
        return policy

    def build(
        self,
        series: Series,
        kind: Union[ChartKind, str],
        axis_labels: Tuple[str, str],
    ) -> ChartArtifact:
        """
        Assemble the artifact for *series*.

        Args:
            series:      Ordered points from the SeriesBuilder.
            kind:        Chart kind (enum member or Chart.js name).
            axis_labels: ``(x_name, y_name)`` column names.

        Raises:
            UnsupportedChartKindError: no policy for *kind*.
        """
        policy = self.policy_for(kind)
        kind = ChartKind.parse(kind)
        x_name, y_name = axis_labels

        size = len(series) if policy.per_point else 1
        colors = self._palettes[policy.palette_mode].generate(size)

        dataset: Dict[str, Any] = {
            "label": y_name,
            "data": series.values,
            "borderWidth": 1,
        }
        if policy.per_point:
            dataset["backgroundColor"] = [c.background for c in colors]
            dataset["borderColor"] = [c.border for c in colors]
        else:
            dataset["backgroundColor"] = colors[0].background
            dataset["borderColor"] = colors[0].border
        if policy.fill is not None:
            dataset["fill"] = policy.fill

        title = f"{y_name} by {x_name}"
        artifact = ChartArtifact(
            kind=kind,
            title=title,
            labels=tuple(series.labels),
            datasets=(dataset,),
            options=_options(policy, title),
        )
        logger.debug(
            f"[ChartSpecBuilder] {kind.value} '{title}' "
            f"({len(series)} points, {policy.palette_mode.value} palette)"
        )
        return artifact


def _options(policy: ChartKindPolicy, title: str) -> Dict[str, Any]:
    plugins: Dict[str, Any] = {"title": {"display": True, "text": title}}
    if policy.per_point:
        plugins["legend"] = {"position": "top"}

    options: Dict[str, Any] = {"responsive": True, "plugins": plugins}
    if policy.begin_at_zero:
        options["scales"] = {"y": {"beginAtZero": True}}
    return options


def _name(kind: Any) -> str:
    return kind.value if isinstance(kind, ChartKind) else str(kind)
