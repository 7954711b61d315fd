"""
KLineChart Schema Contracts

This module defines all JSON contracts between system components.
These are the authoritative interfaces - all modules must conform to these schemas.
"""

from klinechart.schemas.kline import (
    Bar,
    EnrichedBar,
    IndicatorValue,
    DisplayRow,
)
from klinechart.schemas.indicators import (
    IndicatorRequest,
    IndicatorConfig,
    PeriodSlot,
    MainIndicator,
    SubIndicator,
)
from klinechart.schemas.chart import (
    ChartRequest,
    ChartPeriod,
    ColorList,
    OptionList,
)

__all__ = [
    # K-line
    "Bar",
    "EnrichedBar",
    "IndicatorValue",
    "DisplayRow",
    # Indicators
    "IndicatorRequest",
    "IndicatorConfig",
    "PeriodSlot",
    "MainIndicator",
    "SubIndicator",
    # Chart
    "ChartRequest",
    "ChartPeriod",
    "ColorList",
    "OptionList",
]
