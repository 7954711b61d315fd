"""
Chart Service Interface

Defines the contract for building the native view's option list.
"""

from abc import abstractmethod

from klinechart.services.base import BaseService
from klinechart.schemas.chart import ChartRequest, OptionList


class ChartServiceInterface(BaseService[ChartRequest, OptionList]):
    """
    Chart Service Contract.

    INPUT: ChartRequest
        - bars: OHLCV series (mock series when omitted)
        - config: Indicator configuration and pane selection
        - precisions, palette, pass-through styling

    OUTPUT: OptionList
        - Enriched series with per-bar display rows
        - Echo of the active configuration
    """

    @property
    def name(self) -> str:
        return "ChartService"

    @abstractmethod
    async def execute(self, input_data: ChartRequest) -> OptionList:
        """Build the option list for a request."""
        pass

    @abstractmethod
    def build_option_list(self, request: ChartRequest) -> OptionList:
        """
        Run the full pipeline: bars -> indicators -> display rows -> payload.

        Args:
            request: Chart request

        Returns:
            Self-describing option list

        Raises:
            EmptySeriesError: If the request supplies an empty series
        """
        pass
