"""
Chart Service

CONTRACT:
    Input:  ChartRequest
    Output: OptionList

RESPONSIBILITIES:
    - Use the caller's series or generate a mock one
    - Run the indicator engine for the active configuration
    - Attach per-bar display rows
    - Pack the self-describing payload for the native chart view
"""

from klinechart.services.chart.interface import ChartServiceInterface
from klinechart.services.chart.service import ChartService, get_chart_service

__all__ = [
    "ChartServiceInterface",
    "ChartService",
    "get_chart_service",
]
