"""
ChartOrchestrator — thin coordinator for the chart pipeline.

Single Responsibility: wire the phases together in order.
All heavy logic is delegated to specialized modules:

  Upload    → TabularDataSet      (``chartdeck.services.data.dataset``)
  Sort      → SeriesBuilder       (``chartdeck.services.charts.series``)
  Assemble  → ChartSpecBuilder    (``chartdeck.services.charts.builder``)
  Install   → ChartLifecycleManager (``chartdeck.services.charts.lifecycle``)

``generate()`` either fully succeeds (new artifact bound) or raises
before touching the lifecycle manager, leaving the previous chart on
screen.

Usage::

    from chartdeck.services.orchestrator import chart_orchestrator

    chart_orchestrator.load_dataset(headers, rows)
    chart_orchestrator.select(x_column="city", y_column="pop", kind="pie")
    artifact = chart_orchestrator.generate()
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Mapping, Optional, Sequence, Union

import pandas as pd

from chartdeck.core.config import settings
from chartdeck.core.exceptions import AxisNotSelectedError, ChartDeckError
from chartdeck.services.charts.base import AxisSelection, ChartArtifact, ChartKind
from chartdeck.services.charts.builder import ChartSpecBuilder
from chartdeck.services.charts.lifecycle import ChartLifecycleManager, PayloadRenderer
from chartdeck.services.charts.series import SeriesBuilder
from chartdeck.services.data.dataset import TabularDataSet
from chartdeck.services.orchestrator.context import ChartWorkspace

logger = logging.getLogger(__name__)

_UNSET = object()


class ChartOrchestrator:
    """
    Master coordinator: upload → selection → generate → install.
    """

    def __init__(
        self,
        lifecycle: ChartLifecycleManager,
        spec_builder: Optional[ChartSpecBuilder] = None,
        series_builder: Optional[SeriesBuilder] = None,
        default_kind: Union[ChartKind, str] = ChartKind.BAR,
        default_target: Optional[str] = None,
    ) -> None:
        self.lifecycle = lifecycle
        self.spec_builder = spec_builder or ChartSpecBuilder()
        self.series_builder = series_builder or SeriesBuilder()
        self.default_target = default_target
        self.workspace = ChartWorkspace(kind=ChartKind.parse(default_kind))

    # ─────────────────────────────────────────────────────────
    #  UPLOAD
    # ─────────────────────────────────────────────────────────

    def load_dataset(
        self,
        headers: Sequence[str],
        rows: Sequence[Mapping[str, Any]],
    ) -> TabularDataSet:
        """Ingest an upload and make it the current dataset."""
        try:
            dataset = TabularDataSet.ingest(headers, rows)
        except ChartDeckError as exc:
            logger.warning(f"[ChartOrchestrator] Upload rejected: {exc.message}")
            raise
        return self._replace_dataset(dataset)

    def load_frame(self, df: pd.DataFrame) -> TabularDataSet:
        """Same as ``load_dataset`` for a DataFrame from the reader."""
        try:
            dataset = TabularDataSet.from_frame(df)
        except ChartDeckError as exc:
            logger.warning(f"[ChartOrchestrator] Upload rejected: {exc.message}")
            raise
        return self._replace_dataset(dataset)

    def _replace_dataset(self, dataset: TabularDataSet) -> TabularDataSet:
        selection = self.workspace.selection
        # Drop axis choices that the new upload does not have.
        self.workspace.selection = AxisSelection(
            x_column=selection.x_column if dataset.has_column(selection.x_column) else None,
            y_column=selection.y_column if dataset.has_column(selection.y_column) else None,
        )
        self.workspace.dataset = dataset
        return dataset

    def preview(self, limit: Optional[int] = None) -> Dict[str, Any]:
        dataset = self._require_dataset()
        return dataset.preview(settings.PREVIEW_ROW_LIMIT if limit is None else limit)

    # ─────────────────────────────────────────────────────────
    #  SELECTION
    # ─────────────────────────────────────────────────────────

    def select(
        self,
        x_column: Any = _UNSET,
        y_column: Any = _UNSET,
        kind: Any = _UNSET,
    ) -> ChartWorkspace:
        """
        Update axis and/or kind. Omitted arguments keep their value;
        ``""`` or ``None`` unsets an axis.

        Raises:
            UnsupportedChartKindError: *kind* is not a known kind.
        """
        new_kind = self.workspace.kind if kind is _UNSET else ChartKind.parse(kind)
        current = self.workspace.selection
        self.workspace.selection = AxisSelection(
            x_column=current.x_column if x_column is _UNSET else (x_column or None),
            y_column=current.y_column if y_column is _UNSET else (y_column or None),
        )
        self.workspace.kind = new_kind
        logger.info(
            f"[ChartOrchestrator] Selection: x={self.workspace.selection.x_column!r} "
            f"y={self.workspace.selection.y_column!r} kind={new_kind.value}"
        )
        return self.workspace

    # ─────────────────────────────────────────────────────────
    #  GENERATE / RELEASE
    # ─────────────────────────────────────────────────────────

    def generate(self, target: Optional[str] = None) -> ChartArtifact:
        """
        Run the full pipeline and bind the result to *target*.

        Raises:
            AxisNotSelectedError:      no dataset, or an axis unset/unknown.
            UnsupportedChartKindError: kind without a policy.
            InvalidTargetError:        unknown target.
        """
        t0 = time.perf_counter()
        target = target or self.default_target or settings.DEFAULT_TARGET
        # Validate the target before doing any work.
        self.lifecycle.state(target)

        dataset = self._require_dataset()
        selection = self.workspace.selection
        series = self.series_builder.build(dataset, selection)
        artifact = self.spec_builder.build(
            series,
            self.workspace.kind,
            (selection.x_column, selection.y_column),
        )

        self.lifecycle.install(target, artifact)
        elapsed = time.perf_counter() - t0
        logger.info(
            f"[ChartOrchestrator] Generated '{artifact.title}' "
            f"({self.workspace.kind.value}, {len(series)} points) "
            f"on '{target}' in {elapsed:.4f}s"
        )
        return artifact

    def release(self, target: Optional[str] = None) -> None:
        self.lifecycle.release(target or self.default_target or settings.DEFAULT_TARGET)

    def shutdown(self) -> None:
        self.lifecycle.release_all()

    def _require_dataset(self) -> TabularDataSet:
        if self.workspace.dataset is None:
            raise AxisNotSelectedError("Upload a dataset before generating a chart")
        return self.workspace.dataset


def create_orchestrator() -> ChartOrchestrator:
    """Orchestrator wired to a ``PayloadRenderer`` and the configured targets."""
    targets = list(settings.RENDER_TARGETS)
    if settings.DEFAULT_TARGET not in targets:
        targets.append(settings.DEFAULT_TARGET)
    return ChartOrchestrator(
        lifecycle=ChartLifecycleManager(PayloadRenderer(), targets),
        default_kind=settings.DEFAULT_CHART_KIND,
        default_target=settings.DEFAULT_TARGET,
    )


# ── Singleton ────────────────────────────────────────────────────
chart_orchestrator = create_orchestrator()
