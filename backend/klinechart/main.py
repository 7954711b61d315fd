"""
KLineChart Backend - FastAPI Application

Serves the option-list payload for the native K-line chart view.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from klinechart.core.config import settings
from klinechart.api.v1 import router as api_v1_router
from klinechart.services.chart import get_chart_service
from klinechart.services.indicators import get_indicator_service

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{settings.app_name} v{settings.app_version} ({settings.environment})")
    logger.info(
        f"Display: price precision {settings.price_precision}, "
        f"volume precision {settings.volume_precision}, time '{settings.time_pattern}'"
    )
    yield
    logger.info(f"{settings.app_name} stopped")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Indicator pipeline for the K-line chart view.

    - **Series**: caller-supplied OHLCV bars, or a seeded mock random walk
    - **Indicators**: MA, VOL MA, BOLL, MACD, KDJ, RSI, WR (NumPy)
    - **Display rows**: formatted detail-panel lines for every bar
    - **Option list**: one self-describing JSON payload per request
    """,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health():
    """Service health, one flag per pipeline service."""
    services = {
        service.name: await service.health_check()
        for service in (get_indicator_service(), get_chart_service())
    }
    return {
        "status": "healthy" if all(services.values()) else "degraded",
        "version": settings.app_version,
        "services": services,
    }


@app.get("/")
async def index():
    return {"app": settings.app_name, "docs": app.docs_url, "health": "/health"}
