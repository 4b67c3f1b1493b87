"""System endpoints — health check and workspace summary."""

from fastapi import APIRouter, Depends

from chartdeck.api.v1.dependencies import get_orchestrator
from chartdeck.services.orchestrator import ChartOrchestrator

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/health")
async def health_check(orchestrator: ChartOrchestrator = Depends(get_orchestrator)):
    """Basic liveness probe."""
    return {
        "status": "ok",
        "targets": orchestrator.lifecycle.targets,
        "workspace": orchestrator.workspace.summary(),
    }
