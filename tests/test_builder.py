"""Unit tests for policy-driven chart assembly."""

from __future__ import annotations

import random

import pytest

from chartdeck.config.chart_registry import CHART_KIND_REGISTRY, PaletteMode
from chartdeck.core.exceptions import UnsupportedChartKindError
from chartdeck.services.charts.base import ChartKind, Series, SeriesPoint
from chartdeck.services.charts.builder import ChartSpecBuilder
from chartdeck.services.charts.palette import BASE_PALETTE

pytestmark = pytest.mark.unit


def _series(n: int) -> Series:
    return Series(points=tuple(SeriesPoint(label=f"p{i}", value=float(i)) for i in range(n)))


def test_registry_covers_every_kind() -> None:
    """Each ChartKind has exactly one policy."""

    assert set(CHART_KIND_REGISTRY) == set(ChartKind)
    assert CHART_KIND_REGISTRY[ChartKind.POLAR_AREA].palette_mode is PaletteMode.RANDOMIZED


@pytest.mark.parametrize("kind", [ChartKind.PIE, ChartKind.DOUGHNUT, ChartKind.POLAR_AREA])
def test_segment_kinds_get_one_colour_per_point(kind: ChartKind) -> None:
    """Pie-like kinds receive colour arrays sized to the series."""

    artifact = ChartSpecBuilder(rng=random.Random(3)).build(_series(5), kind, ("x", "y"))
    dataset = artifact.datasets[0]
    assert isinstance(dataset["backgroundColor"], list)
    assert len(dataset["backgroundColor"]) == 5
    assert len(dataset["borderColor"]) == 5
    assert "fill" not in dataset
    assert "scales" not in artifact.options
    assert artifact.options["plugins"]["legend"] == {"position": "top"}


@pytest.mark.parametrize(
    ("kind", "fill", "zero"),
    [(ChartKind.BAR, True, True), (ChartKind.LINE, False, True), (ChartKind.RADAR, True, False)],
)
def test_series_kinds_get_a_scalar_colour(kind: ChartKind, fill: bool, zero: bool) -> None:
    """Bar/line/radar use one colour and the table's fill/baseline flags."""

    artifact = ChartSpecBuilder().build(_series(4), kind, ("x", "y"))
    dataset = artifact.datasets[0]
    assert dataset["backgroundColor"] == BASE_PALETTE[0].background
    assert dataset["borderColor"] == BASE_PALETTE[0].border
    assert dataset["fill"] is fill
    assert dataset["borderWidth"] == 1
    if zero:
        assert artifact.options["scales"] == {"y": {"beginAtZero": True}}
    else:
        assert "scales" not in artifact.options


def test_pie_uses_first_three_base_colours() -> None:
    """A three-point pie gets base palette entries 0, 1 and 2."""

    artifact = ChartSpecBuilder().build(_series(3), "pie", ("city", "pop"))
    assert artifact.datasets[0]["backgroundColor"] == [c.background for c in BASE_PALETTE[:3]]


def test_title_label_and_data() -> None:
    """Title is '<y> by <x>' and the dataset carries the Y name and values."""

    artifact = ChartSpecBuilder().build(_series(2), ChartKind.BAR, ("city", "pop"))
    config = artifact.to_config()
    assert artifact.title == "pop by city"
    assert config["type"] == "bar"
    assert config["data"]["labels"] == ["p0", "p1"]
    assert config["data"]["datasets"][0]["label"] == "pop"
    assert config["data"]["datasets"][0]["data"] == [0.0, 1.0]
    assert config["options"]["plugins"]["title"] == {"display": True, "text": "pop by city"}


def test_polar_area_is_reproducible_with_a_seed() -> None:
    """The randomized palette follows the injected random source."""

    a = ChartSpecBuilder(rng=random.Random(99)).build(_series(3), "polarArea", ("x", "y"))
    b = ChartSpecBuilder(rng=random.Random(99)).build(_series(3), "polarArea", ("x", "y"))
    assert a.datasets[0]["backgroundColor"] == b.datasets[0]["backgroundColor"]
    assert all(c.endswith(", 0.7)") for c in a.datasets[0]["backgroundColor"])


def test_empty_series_builds() -> None:
    """Zero points still produce an artifact."""

    artifact = ChartSpecBuilder().build(_series(0), ChartKind.DOUGHNUT, ("x", "y"))
    assert artifact.datasets[0]["backgroundColor"] == []


def test_unknown_kind_is_rejected() -> None:
    """Kinds outside the table raise UnsupportedChartKindError."""

    with pytest.raises(UnsupportedChartKindError):
        ChartSpecBuilder().build(_series(1), "scatter", ("x", "y"))


def test_kind_missing_from_registry_is_rejected() -> None:
    """A valid kind without a policy entry is still unsupported."""

    registry = {ChartKind.BAR: CHART_KIND_REGISTRY[ChartKind.BAR]}
    with pytest.raises(UnsupportedChartKindError):
        ChartSpecBuilder(registry=registry).build(_series(1), ChartKind.PIE, ("x", "y"))


def test_config_is_a_copy() -> None:
    """Mutating an exported config does not touch the artifact."""

    artifact = ChartSpecBuilder().build(_series(2), ChartKind.BAR, ("x", "y"))
    config = artifact.to_config()
    config["data"]["datasets"][0]["data"].append(5)
    assert artifact.datasets[0]["data"] == [0.0, 1.0]
