"""
Indicator Engine Service Interface

Defines the contract for the indicator calculation layer.
"""

from abc import abstractmethod

from klinechart.services.base import BaseService
from klinechart.schemas.kline import Bar, EnrichedBar
from klinechart.schemas.indicators import IndicatorConfig, IndicatorRequest


class IndicatorServiceInterface(BaseService[IndicatorRequest, list[EnrichedBar]]):
    """
    Indicator Engine Service Contract.

    INPUT: IndicatorRequest
        - bars: Ordered OHLCV series
        - config: Which indicators to run (default target list when omitted)

    OUTPUT: list[EnrichedBar]
        - Same length and order as the input series
        - Only the fields implied by the configuration are present
    """

    @property
    def name(self) -> str:
        return "IndicatorService"

    @abstractmethod
    async def execute(self, input_data: IndicatorRequest) -> list[EnrichedBar]:
        """Enrich the request's series."""
        pass

    @abstractmethod
    def enrich(self, bars: list[Bar], config: IndicatorConfig) -> list[EnrichedBar]:
        """
        Run the configured calculators over the whole series.

        Args:
            bars: OHLCV series, oldest first
            config: Indicator configuration

        Returns:
            A freshly built enriched series
        """
        pass
