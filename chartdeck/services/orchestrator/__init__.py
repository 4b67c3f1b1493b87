"""
Orchestrator package — chart generation workflow.

Modules:
  context    — ChartWorkspace state container
  pipeline   — ChartOrchestrator coordinator

Usage::

    from chartdeck.services.orchestrator import chart_orchestrator

    artifact = chart_orchestrator.generate("myChart")
"""

from chartdeck.services.orchestrator.context import ChartWorkspace
from chartdeck.services.orchestrator.pipeline import (
    ChartOrchestrator,
    chart_orchestrator,
    create_orchestrator,
)

__all__ = [
    "ChartWorkspace",
    "ChartOrchestrator",
    "chart_orchestrator",
    "create_orchestrator",
]
