"""
Chart Kind Registry Configuration.

Maps every ``ChartKind`` to the structural policy used by the
ChartSpecBuilder. This file is the ONLY place where a chart kind's
dataset shape is decided; the builder never branches on the kind.

Values: ``ChartKindPolicy`` with:
  per_point       → bool : one colour per data point (True) or one
                           colour for the whole series (False).
  fill            → bool | None : dataset ``fill`` flag (None → omitted).
  begin_at_zero   → bool | None : force ``scales.y.beginAtZero``
                                  (None → no cartesian scale).
  palette_mode    → PaletteMode : default palette strategy.

To add a new chart kind:
  1. Add the member to ``ChartKind`` (services/charts/base.py).
  2. Add an entry here.
  Done. No other files to touch.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from chartdeck.services.charts.base import ChartKind


class PaletteMode(str, Enum):
    DETERMINISTIC = "deterministic"
    RANDOMIZED = "randomized"


@dataclass(frozen=True)
class ChartKindPolicy:
    per_point: bool
    fill: Optional[bool]
    begin_at_zero: Optional[bool]
    palette_mode: PaletteMode


CHART_KIND_REGISTRY: Dict[ChartKind, ChartKindPolicy] = {
    # ── Cartesian / radial series (scalar colour) ────────────
    ChartKind.BAR: ChartKindPolicy(
        per_point=False, fill=True, begin_at_zero=True,
        palette_mode=PaletteMode.DETERMINISTIC,
    ),
    ChartKind.LINE: ChartKindPolicy(
        per_point=False, fill=False, begin_at_zero=True,
        palette_mode=PaletteMode.DETERMINISTIC,
    ),
    ChartKind.RADAR: ChartKindPolicy(
        per_point=False, fill=True, begin_at_zero=False,
        palette_mode=PaletteMode.DETERMINISTIC,
    ),

    # ── Segment charts (colour per point) ────────────────────
    ChartKind.PIE: ChartKindPolicy(
        per_point=True, fill=None, begin_at_zero=None,
        palette_mode=PaletteMode.DETERMINISTIC,
    ),
    ChartKind.DOUGHNUT: ChartKindPolicy(
        per_point=True, fill=None, begin_at_zero=None,
        palette_mode=PaletteMode.DETERMINISTIC,
    ),
    ChartKind.POLAR_AREA: ChartKindPolicy(
        per_point=True, fill=None, begin_at_zero=None,
        palette_mode=PaletteMode.RANDOMIZED,
    ),
}


# ── Base palette ─────────────────────────────────────────────────
# (r, g, b) triples; background alpha 0.6, border alpha 1.0.

BASE_PALETTE_RGB: Tuple[Tuple[int, int, int], ...] = (
    (54, 162, 235),
    (255, 99, 132),
    (255, 206, 86),
    (75, 192, 192),
    (153, 102, 255),
    (255, 159, 64),
    (201, 203, 207),
    (34, 197, 94),
    (236, 72, 153),
    (20, 184, 166),
)

BACKGROUND_ALPHA = 0.6
BORDER_ALPHA = 1.0
RANDOM_ALPHA = 0.7
