"""
Indicator Engine Service

CONTRACT:
    Input:  IndicatorRequest (bars + IndicatorConfig)
    Output: list[EnrichedBar]

RESPONSIBILITIES:
    - Calculate MA and volume MA for every requested period
    - Calculate BOLL on the main pane, MACD / KDJ on the sub pane
    - Calculate RSI and WR for every requested period
    - Merge the results into fresh per-bar records

Uses NumPy for calculations.
All math is deterministic and reproducible.
"""

from klinechart.services.indicators.interface import IndicatorServiceInterface
from klinechart.services.indicators.service import IndicatorService, get_indicator_service

__all__ = [
    "IndicatorServiceInterface",
    "IndicatorService",
    "get_indicator_service",
]
