"""
ChartLifecycleManager — one live chart per rendering target.

Single Responsibility: own the target → artifact binding and call the
renderer's create/destroy primitives in destroy-before-create order.

Per-target states:
  Empty  → no artifact bound.
  Bound  → exactly one artifact bound (plus the renderer's handle).

``install`` on a Bound target first releases the current artifact
completely, then creates the new one. The binding is detached before
``destroy`` runs, so a re-entrant call from inside a renderer hook
never observes (or destroys) the same artifact twice. A handle whose
destroy raises is kept as an orphan and retried by ``release_all``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Protocol

from chartdeck.core.exceptions import InvalidTargetError
from chartdeck.services.charts.base import ChartArtifact

logger = logging.getLogger(__name__)


class ChartRenderer(Protocol):
    """Rendering collaborator: draws and tears down chart instances."""

    def create(self, target: str, artifact: ChartArtifact) -> Any:
        """Draw *artifact* on *target*; return an opaque handle."""

    def destroy(self, handle: Any) -> None:
        """Tear down the instance behind *handle*."""


class TargetState(str, Enum):
    EMPTY = "empty"
    BOUND = "bound"


@dataclass(frozen=True)
class Binding:
    artifact: ChartArtifact
    handle: Any


class PayloadRenderer:
    """
    Default renderer for the HTTP API.

    "Drawing" stores the Chart.js config so a browser canvas can fetch
    it; destroying discards it.
    """

    def __init__(self) -> None:
        self.payloads: Dict[str, Dict[str, Any]] = {}

    def create(self, target: str, artifact: ChartArtifact) -> str:
        self.payloads[target] = artifact.to_config()
        return target

    def destroy(self, handle: str) -> None:
        self.payloads.pop(handle, None)


class ChartLifecycleManager:

    def __init__(self, renderer: ChartRenderer, targets: Iterable[str]) -> None:
        self.renderer = renderer
        self._targets: List[str] = []
        self._bindings: Dict[str, Binding] = {}
        # Handles whose destroy hook raised; retried by release_all().
        self._orphans: List[Any] = []
        for target in targets:
            self.register_target(target)

    # ── Targets ──────────────────────────────────────────────────

    @property
    def targets(self) -> List[str]:
        return list(self._targets)

    def register_target(self, target: str) -> None:
        if not target:
            raise InvalidTargetError("Rendering target identity must not be empty")
        if target not in self._targets:
            self._targets.append(target)

    def _require(self, target: str) -> None:
        if target not in self._targets:
            raise InvalidTargetError(f"Unknown rendering target '{target}'")

    # ── State ────────────────────────────────────────────────────

    def state(self, target: str) -> TargetState:
        self._require(target)
        return TargetState.BOUND if target in self._bindings else TargetState.EMPTY

    def current(self, target: str) -> Optional[ChartArtifact]:
        self._require(target)
        binding = self._bindings.get(target)
        return binding.artifact if binding else None

    # ── Transitions ──────────────────────────────────────────────

    def install(self, target: str, artifact: ChartArtifact) -> ChartArtifact:
        """
        Bind *artifact* to *target*, destroying any previous one first.

        If the renderer fails to create the new instance the target is
        left Empty (the previous instance is already gone).
        """
        self._require(target)
        # Loop: a destroy hook may re-enter and bind another artifact.
        while self._release_binding(target):
            pass

        handle = self.renderer.create(target, artifact)
        while self._release_binding(target):
            pass
        self._bindings[target] = Binding(artifact=artifact, handle=handle)
        logger.info(f"[ChartLifecycle] Installed {artifact.kind.value} chart on '{target}'")
        return artifact

    def release(self, target: str) -> None:
        """Destroy the artifact bound to *target* (no-op when Empty)."""
        self._require(target)
        if self._release_binding(target):
            logger.info(f"[ChartLifecycle] Released chart on '{target}'")

    @property
    def orphans(self) -> List[Any]:
        return list(self._orphans)

    def release_all(self) -> None:
        """
        View teardown: retry failed destroys, then release every bound
        target. A handle whose destroy fails again stays an orphan.
        """
        pending, self._orphans = self._orphans, []
        for handle in pending:
            try:
                self.renderer.destroy(handle)
            except Exception:
                logger.exception("[ChartLifecycle] Retried destroy failed")
                self._orphans.append(handle)
        for target in list(self._bindings):
            self.release(target)

    def _release_binding(self, target: str) -> bool:
        binding = self._bindings.pop(target, None)
        if binding is None:
            return False
        try:
            self.renderer.destroy(binding.handle)
        except Exception:
            logger.exception(f"[ChartLifecycle] Destroy hook failed on '{target}'")
            self._orphans.append(binding.handle)
            raise
        return True
