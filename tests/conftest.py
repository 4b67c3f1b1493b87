"""Shared pytest fixtures for the chart pipeline."""

from __future__ import annotations

import random
from typing import Any, List, Tuple

import pytest

from chartdeck.services.charts.base import ChartArtifact
from chartdeck.services.charts.builder import ChartSpecBuilder
from chartdeck.services.charts.lifecycle import ChartLifecycleManager
from chartdeck.services.data.dataset import TabularDataSet
from chartdeck.services.orchestrator import ChartOrchestrator


class RecordingRenderer:
    """Renderer fake that records create/destroy calls in order."""

    def __init__(self) -> None:
        self.events: List[Tuple[str, Any]] = []
        self.live: dict[int, ChartArtifact] = {}
        self._next = 0

    def create(self, target: str, artifact: ChartArtifact) -> int:
        self._next += 1
        self.events.append(("create", self._next))
        self.live[self._next] = artifact
        return self._next

    def destroy(self, handle: int) -> None:
        self.events.append(("destroy", handle))
        del self.live[handle]


@pytest.fixture()
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture()
def lifecycle(renderer: RecordingRenderer) -> ChartLifecycleManager:
    return ChartLifecycleManager(renderer, ["myChart", "secondary"])


@pytest.fixture()
def cities() -> TabularDataSet:
    return TabularDataSet.ingest(
        ["city", "pop"],
        [
            {"city": "NY", "pop": "10"},
            {"city": "LA", "pop": "8"},
            {"city": "SF", "pop": "9"},
        ],
    )


@pytest.fixture()
def orchestrator(lifecycle: ChartLifecycleManager) -> ChartOrchestrator:
    return ChartOrchestrator(
        lifecycle=lifecycle,
        spec_builder=ChartSpecBuilder(rng=random.Random(1234)),
        default_target="myChart",
    )
