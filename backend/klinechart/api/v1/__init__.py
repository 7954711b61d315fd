"""
API v1 Router

All API endpoints for the chart view.
"""

from fastapi import APIRouter

from klinechart.api.v1.endpoints import chart

router = APIRouter()

# Include all endpoint routers
router.include_router(chart.router, prefix="/chart", tags=["Chart"])
