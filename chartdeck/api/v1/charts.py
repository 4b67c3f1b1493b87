"""
Charts API — selection, generation and lifecycle per rendering target.

Routes:
  PUT    /charts/selection          → set x/y columns and chart kind
  POST   /charts/{target}/generate  → build + install, returns Chart.js config
  GET    /charts/{target}           → currently bound config
  DELETE /charts/{target}           → release the bound chart
"""

from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from chartdeck.api.v1.dependencies import get_orchestrator, http_error
from chartdeck.core.exceptions import ChartDeckError
from chartdeck.services.charts.lifecycle import TargetState
from chartdeck.services.orchestrator import ChartOrchestrator

router = APIRouter(prefix="/charts", tags=["charts"])


class SelectionRequest(BaseModel):
    """
    Partial selection update — omitted fields keep their value.

    ``kind`` is plain text so unknown kinds surface as
    UnsupportedChartKindError rather than a schema failure.
    """
    x_column: Optional[str] = Field(None, description="Label axis column ('' unsets).")
    y_column: Optional[str] = Field(None, description="Magnitude axis column ('' unsets).")
    kind: Optional[str] = Field(None, description="bar | line | pie | doughnut | polarArea | radar")


@router.put("/selection")
async def update_selection(
    req: SelectionRequest,
    orchestrator: ChartOrchestrator = Depends(get_orchestrator),
):
    """Apply the user's axis / chart-kind choices."""
    changes = req.model_dump(exclude_unset=True)
    if changes.get("kind") is None:
        changes.pop("kind", None)
    try:
        workspace = orchestrator.select(**changes)
    except ChartDeckError as exc:
        raise http_error(exc)
    return workspace.summary()


@router.post("/{target}/generate")
async def generate_chart(
    target: str,
    orchestrator: ChartOrchestrator = Depends(get_orchestrator),
):
    """Generate a chart; on failure the previous chart stays bound."""
    try:
        artifact = orchestrator.generate(target)
    except ChartDeckError as exc:
        raise http_error(exc)
    return {"target": target, "title": artifact.title, "config": artifact.to_config()}


@router.get("/{target}")
async def get_chart(
    target: str,
    orchestrator: ChartOrchestrator = Depends(get_orchestrator),
):
    """Config currently bound to *target* (``bound: false`` when Empty)."""
    try:
        state = orchestrator.lifecycle.state(target)
        artifact = orchestrator.lifecycle.current(target)
    except ChartDeckError as exc:
        raise http_error(exc)
    if state is TargetState.EMPTY or artifact is None:
        return {"target": target, "bound": False, "config": None}
    return {"target": target, "bound": True, "title": artifact.title, "config": artifact.to_config()}


@router.delete("/{target}")
async def release_chart(
    target: str,
    orchestrator: ChartOrchestrator = Depends(get_orchestrator),
):
    """Destroy the chart bound to *target*."""
    try:
        orchestrator.release(target)
    except ChartDeckError as exc:
        raise http_error(exc)
    return {"target": target, "bound": False}
