"""
Chart Service Implementation

Runs the whole pipeline for one request and packs the option list the
native chart view consumes. Nothing is cached: every request re-walks the
full series.
"""

import logging
from typing import Optional

from klinechart.core.config import settings
from klinechart.schemas.chart import ChartRequest, ColorList, OptionList
from klinechart.services.base import EmptySeriesError
from klinechart.services.chart.interface import ChartServiceInterface
from klinechart.services.data_ingestion import generate_mock_bars
from klinechart.services.display import DisplayService, get_display_service
from klinechart.services.indicators import IndicatorService, get_indicator_service

logger = logging.getLogger(__name__)


def default_color_list() -> ColorList:
    """Palette from settings, used when the caller sends none."""
    return ColorList(
        increase_color=settings.increase_color,
        decrease_color=settings.decrease_color,
    )


class ChartService(ChartServiceInterface):
    """
    Chart Service.

    bars -> IndicatorService.enrich -> DisplayService.decorate -> OptionList
    """

    def __init__(
        self,
        indicator_service: Optional[IndicatorService] = None,
        display_service: Optional[DisplayService] = None,
    ):
        self.indicator_service = indicator_service or get_indicator_service()
        self.display_service = display_service or get_display_service()

    async def execute(self, input_data: ChartRequest) -> OptionList:
        return self.build_option_list(input_data)

    async def validate_input(self, input_data: ChartRequest) -> ChartRequest:
        if input_data.bars is not None and not input_data.bars:
            raise EmptySeriesError(self.name, "Bar series is empty")
        return input_data

    def build_option_list(self, request: ChartRequest) -> OptionList:
        """Build the complete payload for one request."""
        bars = request.bars
        if bars is None:
            bars = generate_mock_bars(
                count=request.mock_count,
                start_price=settings.mock_start_price,
                interval_ms=request.period.interval_ms,
                seed=request.seed,
            )
        elif not bars:
            raise EmptySeriesError(self.name, "Bar series is empty")

        config = request.config
        color_list = request.color_list or default_color_list()

        enriched = self.indicator_service.enrich(bars, config)
        decorated = self.display_service.decorate(
            enriched,
            config,
            price_precision=request.price_precision,
            volume_precision=request.volume_precision,
            color_list=color_list,
            time_pattern=request.time_pattern,
        )

        config_list = dict(request.config_list or {})
        config_list.setdefault("colorList", color_list.model_dump(by_alias=True))

        logger.info(
            f"Option list built: {len(decorated)} bars, "
            f"main={config.primary.label}, sub={config.second.label}, "
            f"period={request.period.label}"
        )

        return OptionList(
            model_array=decorated,
            target_list=config,
            price=request.price_precision,
            volume=request.volume_precision,
            primary=config.primary,
            second=config.second,
            time=request.period,
            config_list=config_list,
            draw_list=request.draw_list,
        )


# Singleton instance
_service_instance: Optional[ChartService] = None


def get_chart_service() -> ChartService:
    """Get or create chart service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = ChartService()
    return _service_instance
