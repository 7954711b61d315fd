"""
CONTRACT 3: Chart Option List

Input: ChartRequest
Output: OptionList

The option list is the single, self-describing payload handed to the native
chart view: the enriched series with display rows, the active indicator
configuration, precisions, pane selection and pass-through styling.
"""

from enum import Enum
from typing import Any, Optional, Union
from pydantic import ConfigDict, Field, FieldSerializationInfo, field_serializer

from klinechart.schemas.kline import Bar, EnrichedBar, WireModel
from klinechart.schemas.indicators import IndicatorConfig, MainIndicator, SubIndicator


# =============================================================================
# ENUMS
# =============================================================================


class ChartPeriod(int, Enum):
    """Chart time period. Values are the native view's `time` codes."""

    MINUTE_HOUR = -1
    ONE_MINUTE = 1
    THREE_MINUTE = 2
    FIVE_MINUTE = 3
    FIFTEEN_MINUTE = 4
    THIRTY_MINUTE = 5
    ONE_HOUR = 6
    FOUR_HOUR = 7
    SIX_HOUR = 8
    ONE_DAY = 9
    ONE_WEEK = 10
    ONE_MONTH = 11

    @property
    def label(self) -> str:
        return PERIOD_LABELS[self]

    @property
    def interval_ms(self) -> int:
        return PERIOD_INTERVAL_MS[self]


PERIOD_LABELS = {
    ChartPeriod.MINUTE_HOUR: "Minute",
    ChartPeriod.ONE_MINUTE: "1min",
    ChartPeriod.THREE_MINUTE: "3min",
    ChartPeriod.FIVE_MINUTE: "5min",
    ChartPeriod.FIFTEEN_MINUTE: "15min",
    ChartPeriod.THIRTY_MINUTE: "30min",
    ChartPeriod.ONE_HOUR: "1h",
    ChartPeriod.FOUR_HOUR: "4h",
    ChartPeriod.SIX_HOUR: "6h",
    ChartPeriod.ONE_DAY: "1D",
    ChartPeriod.ONE_WEEK: "1W",
    ChartPeriod.ONE_MONTH: "1M",
}

# Period to bar interval in milliseconds
PERIOD_INTERVAL_MS = {
    ChartPeriod.MINUTE_HOUR: 60_000,
    ChartPeriod.ONE_MINUTE: 60_000,
    ChartPeriod.THREE_MINUTE: 180_000,
    ChartPeriod.FIVE_MINUTE: 300_000,
    ChartPeriod.FIFTEEN_MINUTE: 900_000,
    ChartPeriod.THIRTY_MINUTE: 1_800_000,
    ChartPeriod.ONE_HOUR: 3_600_000,
    ChartPeriod.FOUR_HOUR: 14_400_000,
    ChartPeriod.SIX_HOUR: 21_600_000,
    ChartPeriod.ONE_DAY: 86_400_000,
    ChartPeriod.ONE_WEEK: 604_800_000,
    ChartPeriod.ONE_MONTH: 2_592_000_000,
}


# =============================================================================
# INPUT: ChartRequest
# =============================================================================


class ColorList(WireModel):
    """Increase / decrease palette supplied by the theming layer."""

    increase_color: Union[int, str]
    decrease_color: Union[int, str]


class ChartRequest(WireModel):
    """
    Request for a chart option list.
    Sent by: API / native demo shell
    Received by: Chart Service

    Note: When `bars` is omitted a mock series is generated for `period`.
    """

    bars: Optional[list[Bar]] = None
    config: IndicatorConfig = Field(default_factory=lambda: IndicatorConfig.default())
    price_precision: int = Field(default=2, ge=0, le=10)
    volume_precision: int = Field(default=0, ge=0, le=10)
    period: ChartPeriod = ChartPeriod.ONE_MINUTE
    color_list: Optional[ColorList] = None
    time_pattern: str = "MM-DD HH:mm"
    config_list: Optional[dict[str, Any]] = Field(
        default=None, description="Styling options, passed through untouched"
    )
    draw_list: Optional[dict[str, Any]] = Field(
        default=None, description="Drawing-tool options, passed through untouched"
    )
    mock_count: int = Field(default=200, ge=1, le=5000)
    seed: Optional[int] = None


# =============================================================================
# OUTPUT: OptionList (Complete Payload)
# =============================================================================


class OptionList(WireModel):
    """
    Complete chart payload.
    Returned by: Chart Service
    Consumed by: Native chart view (as a JSON string)
    """

    model_config = ConfigDict(protected_namespaces=())

    model_array: list[EnrichedBar]
    should_scroll_to_end: bool = True
    target_list: IndicatorConfig
    price: int = Field(..., ge=0, description="Price precision")
    volume: int = Field(..., ge=0, description="Volume precision")
    primary: MainIndicator
    second: SubIndicator
    time: ChartPeriod
    config_list: dict[str, Any] = Field(default_factory=dict)
    draw_list: Optional[dict[str, Any]] = None

    @field_serializer("target_list")
    def _target_list_to_wire(
        self, config: IndicatorConfig, info: FieldSerializationInfo
    ) -> dict[str, Any]:
        # Pane selection travels as top-level primary/second
        return config.model_dump(
            mode=info.mode,
            by_alias=info.by_alias,
            exclude={"primary", "second"},
        )

    def to_json(self) -> str:
        """Serialize for the native view (camelCase, absent fields omitted)."""
        return self.model_dump_json(by_alias=True, exclude_none=True)
