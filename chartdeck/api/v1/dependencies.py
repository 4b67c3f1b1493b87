"""
FastAPI dependencies — orchestrator access and error translation.

Single Responsibility: give endpoints the shared ``ChartOrchestrator``
(overridable in tests via ``app.dependency_overrides``) and map domain
errors to HTTP responses in one place.
"""

from __future__ import annotations

from typing import Dict, Type

from fastapi import HTTPException

from chartdeck.core.exceptions import (
    AxisNotSelectedError,
    ChartDeckError,
    InvalidTargetError,
    SchemaError,
    UnsupportedChartKindError,
)
from chartdeck.services.orchestrator import ChartOrchestrator, chart_orchestrator

_STATUS_BY_ERROR: Dict[Type[ChartDeckError], int] = {
    SchemaError: 422,
    AxisNotSelectedError: 400,
    UnsupportedChartKindError: 400,
    InvalidTargetError: 404,
}


def get_orchestrator() -> ChartOrchestrator:
    """Dependency: the process-wide orchestrator."""
    return chart_orchestrator


def http_error(exc: ChartDeckError) -> HTTPException:
    """Translate a pipeline error into an ``HTTPException``."""
    for error_type, status in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return HTTPException(status_code=status, detail=exc.message)
    return HTTPException(status_code=400, detail=exc.message)
