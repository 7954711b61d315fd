"""
Chart API Endpoints

Endpoints that return the option list for the native K-line view.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from klinechart.core.config import settings
from klinechart.schemas.chart import ChartPeriod, ChartRequest
from klinechart.schemas.indicators import IndicatorConfig, MainIndicator, SubIndicator
from klinechart.services.base import ServiceError
from klinechart.services.chart import get_chart_service

logger = logging.getLogger(__name__)

router = APIRouter()


async def _build(request: ChartRequest) -> dict:
    chart_service = get_chart_service()
    try:
        option_list = await chart_service.run(request)
    except ServiceError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())
    except Exception as e:
        logger.error(f"Option list build failed: {e}")
        raise HTTPException(status_code=500, detail=f"Option list build failed: {e}")

    return option_list.model_dump(mode="json", by_alias=True, exclude_none=True)


@router.get("/periods")
async def list_periods():
    """List the chart time periods and their bar intervals."""
    return [
        {"value": period.value, "label": period.label, "intervalMs": period.interval_ms}
        for period in ChartPeriod
    ]


@router.get("/option-list")
async def get_option_list(
    primary: int = Query(default=MainIndicator.MA.value),
    second: int = Query(default=SubIndicator.MACD.value),
    period: int = Query(default=ChartPeriod.ONE_MINUTE.value),
    count: int = Query(default=settings.mock_bar_count, ge=1, le=5000),
    seed: Optional[int] = Query(default=None),
):
    """
    Get the option list for a mock series.

    Args:
        primary: Main-pane code (0 none, 1 MA, 2 BOLL)
        second: Sub-pane code (0 none, 3 MACD, 4 KDJ, 5 RSI, 6 WR)
        period: Chart period code
        count: Number of mock bars
        seed: Seed for a reproducible series
    """
    try:
        main_indicator = MainIndicator(primary)
        sub_indicator = SubIndicator(second)
        chart_period = ChartPeriod(period)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    request = ChartRequest(
        config=IndicatorConfig.default(main_indicator, sub_indicator),
        price_precision=settings.price_precision,
        volume_precision=settings.volume_precision,
        period=chart_period,
        time_pattern=settings.time_pattern,
        mock_count=count,
        seed=seed,
    )
    return await _build(request)


@router.post("/option-list")
async def post_option_list(request: ChartRequest):
    """
    Get the option list for a caller-supplied request.

    The series is taken from `bars`; when omitted a mock series is used.
    """
    return await _build(request)
