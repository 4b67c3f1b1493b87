"""
API v1 — Router aggregation.
"""

from fastapi import APIRouter

from chartdeck.api.v1.system import router as system_router
from chartdeck.api.v1.datasets import router as datasets_router
from chartdeck.api.v1.charts import router as charts_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(system_router)
api_router.include_router(datasets_router)
api_router.include_router(charts_router)
