"""
PaletteGenerator — colours for N data points.

Two interchangeable strategies behind ``generate(count)``:

  DeterministicPalette : base palette entry ``i % 10`` for slot ``i``.
                         Stable across re-renders.
  RandomizedPalette    : three uniform ints in [0, 255] per slot, alpha
                         0.7. The random source is injectable.

Both return an empty palette for ``count == 0``.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from chartdeck.config.chart_registry import (
    BACKGROUND_ALPHA,
    BASE_PALETTE_RGB,
    BORDER_ALPHA,
    RANDOM_ALPHA,
    PaletteMode,
)
from chartdeck.core.config import settings


def rgba(r: int, g: int, b: int, a: float) -> str:
    return f"rgba({r}, {g}, {b}, {a})"


@dataclass(frozen=True, slots=True)
class PaletteColor:
    background: str
    border: str


BASE_PALETTE: List[PaletteColor] = [
    PaletteColor(
        background=rgba(r, g, b, BACKGROUND_ALPHA),
        border=rgba(r, g, b, BORDER_ALPHA),
    )
    for r, g, b in BASE_PALETTE_RGB
]


class PaletteGenerator(ABC):

    mode: PaletteMode

    @abstractmethod
    def generate(self, count: int) -> List[PaletteColor]:
        """Return at least *count* colours (exactly *count* here)."""


class DeterministicPalette(PaletteGenerator):

    mode = PaletteMode.DETERMINISTIC

    def generate(self, count: int) -> List[PaletteColor]:
        _check_count(count)
        return [BASE_PALETTE[i % len(BASE_PALETTE)] for i in range(count)]


class RandomizedPalette(PaletteGenerator):
    """
    Random colours; the border reuses the RGB at full opacity.

    Pass a seeded ``random.Random`` for reproducible output.
    """

    mode = PaletteMode.RANDOMIZED

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random(settings.PALETTE_SEED)

    def generate(self, count: int) -> List[PaletteColor]:
        _check_count(count)
        colors: List[PaletteColor] = []
        for _ in range(count):
            r = self.rng.randint(0, 255)
            g = self.rng.randint(0, 255)
            b = self.rng.randint(0, 255)
            colors.append(
                PaletteColor(
                    background=rgba(r, g, b, RANDOM_ALPHA),
                    border=rgba(r, g, b, BORDER_ALPHA),
                )
            )
        return colors


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"Palette size must be >= 0, got {count}")


def palette_for(
    mode: PaletteMode,
    rng: Optional[random.Random] = None,
) -> PaletteGenerator:
    """Strategy instance for *mode*."""
    if mode is PaletteMode.RANDOMIZED:
        return RandomizedPalette(rng)
    return DeterministicPalette()
