"""
Dataset API — upload ingestion and data preview.

Routes:
  POST /datasets          → ingest ``{headers, rows}`` from the ingestion service
  GET  /datasets/preview  → first N rows + totals
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from chartdeck.api.v1.dependencies import get_orchestrator, http_error
from chartdeck.core.exceptions import ChartDeckError
from chartdeck.services.orchestrator import ChartOrchestrator

router = APIRouter(prefix="/datasets", tags=["datasets"])


class DatasetUploadRequest(BaseModel):
    """Parsed spreadsheet as produced by the ingestion service."""
    headers: List[str] = Field(..., description="Ordered column names.")
    rows: List[Dict[str, Any]] = Field(
        default_factory=list,
        description="One mapping per row: column → number, text or null.",
    )


@router.post("")
async def upload_dataset(
    req: DatasetUploadRequest,
    orchestrator: ChartOrchestrator = Depends(get_orchestrator),
):
    """Replace the current dataset with a freshly ingested one."""
    try:
        dataset = orchestrator.load_dataset(req.headers, req.rows)
    except ChartDeckError as exc:
        raise http_error(exc)
    return {
        "status": "loaded",
        "columns": list(dataset.columns),
        "total_rows": len(dataset),
        "selection": orchestrator.workspace.summary(),
    }


@router.get("/preview")
async def preview_dataset(
    limit: Optional[int] = Query(None, ge=0, description="Rows to show."),
    orchestrator: ChartOrchestrator = Depends(get_orchestrator),
):
    """Data preview table for the current dataset."""
    if not orchestrator.workspace.has_dataset:
        raise HTTPException(status_code=404, detail="No dataset uploaded")
    return orchestrator.preview(limit)
