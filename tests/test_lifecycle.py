"""Unit tests for the one-chart-per-target lifecycle."""

from __future__ import annotations

import pytest

from chartdeck.core.exceptions import InvalidTargetError
from chartdeck.services.charts.base import ChartArtifact, ChartKind
from chartdeck.services.charts.lifecycle import (
    ChartLifecycleManager,
    PayloadRenderer,
    TargetState,
)

pytestmark = pytest.mark.unit


def _artifact(title: str = "y by x") -> ChartArtifact:
    return ChartArtifact(
        kind=ChartKind.BAR,
        title=title,
        labels=("a",),
        datasets=({"label": "y", "data": [1]},),
    )


def test_install_binds_on_empty_target(lifecycle, renderer) -> None:
    """Empty → Bound with a single create call."""

    assert lifecycle.state("myChart") is TargetState.EMPTY
    art = _artifact()
    lifecycle.install("myChart", art)
    assert lifecycle.state("myChart") is TargetState.BOUND
    assert lifecycle.current("myChart") is art
    assert renderer.events == [("create", 1)]


def test_reinstall_destroys_previous_before_create(lifecycle, renderer) -> None:
    """The prior artifact is destroyed exactly once, before the new create."""

    first, second = _artifact("first"), _artifact("second")
    lifecycle.install("myChart", first)
    lifecycle.install("myChart", second)
    assert renderer.events == [("create", 1), ("destroy", 1), ("create", 2)]
    assert lifecycle.current("myChart") is second
    assert list(renderer.live) == [2]


def test_repeated_install_converges_to_one_binding(lifecycle, renderer) -> None:
    """Rapid repeated installs never leak instances."""

    art = _artifact()
    for _ in range(5):
        lifecycle.install("myChart", art)
    assert len(renderer.live) == 1
    assert lifecycle.current("myChart") is art


def test_targets_are_independent(lifecycle, renderer) -> None:
    """Installing on one target leaves the other alone."""

    lifecycle.install("myChart", _artifact())
    lifecycle.install("secondary", _artifact())
    assert len(renderer.live) == 2
    lifecycle.release("myChart")
    assert lifecycle.state("myChart") is TargetState.EMPTY
    assert lifecycle.state("secondary") is TargetState.BOUND


def test_release_is_a_noop_when_empty(lifecycle, renderer) -> None:
    """Releasing an Empty target does nothing."""

    lifecycle.release("myChart")
    assert renderer.events == []


def test_release_all(lifecycle, renderer) -> None:
    """Teardown destroys every bound artifact."""

    lifecycle.install("myChart", _artifact())
    lifecycle.install("secondary", _artifact())
    lifecycle.release_all()
    assert renderer.live == {}


@pytest.mark.parametrize("op", ["install", "release", "state", "current"])
def test_unknown_target_is_rejected(lifecycle, op) -> None:
    """Every operation validates the target identity."""

    with pytest.raises(InvalidTargetError):
        if op == "install":
            lifecycle.install("nope", _artifact())
        else:
            getattr(lifecycle, op)("nope")


def test_reentrant_install_from_destroy_hook_converges() -> None:
    """An install triggered inside destroy still ends with one live chart."""

    class ReentrantRenderer:
        def __init__(self) -> None:
            self.live = set()
            self.manager = None
            self.counter = 0
            self.reentered = False

        def create(self, target, artifact):
            self.counter += 1
            self.live.add(self.counter)
            return self.counter

        def destroy(self, handle):
            self.live.discard(handle)
            if not self.reentered:
                self.reentered = True
                self.manager.install("myChart", _artifact("inner"))

    renderer = ReentrantRenderer()
    manager = ChartLifecycleManager(renderer, ["myChart"])
    renderer.manager = manager

    manager.install("myChart", _artifact("first"))
    outer = _artifact("outer")
    manager.install("myChart", outer)

    assert len(renderer.live) == 1
    assert manager.current("myChart") is outer


def test_payload_renderer_keeps_config_per_target() -> None:
    """The default renderer stores the Chart.js config until destroyed."""

    renderer = PayloadRenderer()
    manager = ChartLifecycleManager(renderer, ["myChart"])
    manager.install("myChart", _artifact())
    assert renderer.payloads["myChart"]["type"] == "bar"
    manager.release("myChart")
    assert renderer.payloads == {}


def test_failed_destroy_is_retried_on_release_all(lifecycle, renderer) -> None:
    """A handle whose destroy raised is kept and torn down at teardown."""

    real_destroy = renderer.destroy
    calls = {"n": 0}

    def flaky_destroy(handle):
        calls["n"] += 1
        if calls["n"] == 1:
            raise RuntimeError("canvas busy")
        real_destroy(handle)

    renderer.destroy = flaky_destroy
    lifecycle.install("myChart", _artifact())
    with pytest.raises(RuntimeError):
        lifecycle.release("myChart")

    assert lifecycle.state("myChart") is TargetState.EMPTY
    assert lifecycle.orphans == [1]
    assert 1 in renderer.live

    lifecycle.release_all()
    assert lifecycle.orphans == []
    assert renderer.live == {}
