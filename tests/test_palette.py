"""Unit tests for palette strategies."""

from __future__ import annotations

import random

import pytest

from chartdeck.config.chart_registry import PaletteMode
from chartdeck.services.charts.palette import (
    BASE_PALETTE,
    DeterministicPalette,
    RandomizedPalette,
    palette_for,
)

pytestmark = pytest.mark.unit


def test_base_palette_has_ten_pairs_with_expected_alpha() -> None:
    """Ten (background, border) pairs at alpha 0.6 / 1.0."""

    assert len(BASE_PALETTE) == 10
    for color in BASE_PALETTE:
        assert color.background.endswith(", 0.6)")
        assert color.border.endswith(", 1.0)")


@pytest.mark.parametrize("count", [0, 1, 3, 10, 11, 25])
def test_deterministic_palette_cycles_base_palette(count: int) -> None:
    """Slot i always gets base entry i % 10."""

    colors = DeterministicPalette().generate(count)
    assert len(colors) == count
    for i, color in enumerate(colors):
        assert color == BASE_PALETTE[i % 10]


def test_randomized_palette_uses_injected_source() -> None:
    """Three draws in [0, 255] per slot with alpha 0.7."""

    colors = RandomizedPalette(random.Random(7)).generate(4)
    expected_rng = random.Random(7)
    expected = []
    for _ in range(4):
        r, g, b = (expected_rng.randint(0, 255) for _ in range(3))
        expected.append(f"rgba({r}, {g}, {b}, 0.7)")
    assert [c.background for c in colors] == expected


def test_randomized_palette_empty() -> None:
    """count = 0 yields an empty palette."""

    assert RandomizedPalette(random.Random(0)).generate(0) == []


def test_negative_count_is_rejected() -> None:
    """Negative sizes are a programming error."""

    with pytest.raises(ValueError):
        DeterministicPalette().generate(-1)


def test_palette_for_selects_strategy() -> None:
    """Mode → strategy lookup."""

    assert isinstance(palette_for(PaletteMode.DETERMINISTIC), DeterministicPalette)
    assert isinstance(palette_for(PaletteMode.RANDOMIZED, random.Random(1)), RandomizedPalette)
