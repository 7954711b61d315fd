"""
CONTRACT 2: Indicator Engine

Input: IndicatorRequest (bars + IndicatorConfig)
Output: list[EnrichedBar]

IndicatorConfig mirrors the native view's "target list": which periods of
each multi-period family are requested and at which slot, the parameters of
the single-choice families, and the indicator currently selected on the main
pane and on the sub pane.
"""

from enum import Enum
from typing import Optional
from pydantic import Field, field_serializer, model_validator

from klinechart.schemas.kline import (
    Bar,
    WireModel,
    MA_SLOTS,
    VOLUME_MA_SLOTS,
    RSI_SLOTS,
    WR_SLOTS,
)


# =============================================================================
# ENUMS
# =============================================================================


class MainIndicator(int, Enum):
    """Main-pane selection. Values are the native view's `primary` codes."""

    NONE = 0
    MA = 1
    BOLL = 2

    @property
    def label(self) -> str:
        return self.name


class SubIndicator(int, Enum):
    """Sub-pane selection. Values are the native view's `second` codes."""

    NONE = 0
    MACD = 3
    KDJ = 4
    RSI = 5
    WR = 6

    @property
    def label(self) -> str:
        return self.name


# =============================================================================
# CONFIGURATION
# =============================================================================


class PeriodSlot(WireModel):
    """A requested period and the output slot it writes to."""

    period: int = Field(..., alias="title", gt=0)
    selected: bool = False
    index: int = Field(..., ge=0)

    @field_serializer("period")
    def _period_as_text(self, period: int) -> str:
        return str(period)


def _slots(periods: list[int], selected: bool) -> list[PeriodSlot]:
    return [
        PeriodSlot(period=period, selected=selected, index=index)
        for index, period in enumerate(periods)
    ]


class IndicatorConfig(WireModel):
    """
    Declarative indicator configuration.

    Multi-period families: ma_list, ma_volume_list, rsi_list, wr_list.
    Single-choice families: BOLL (n, p), MACD (s, l, m), KDJ (n, m1, m2).
    """

    ma_list: list[PeriodSlot] = Field(default_factory=list)
    ma_volume_list: list[PeriodSlot] = Field(default_factory=list)
    boll_n: int = Field(default=20, gt=0)
    boll_p: int = Field(default=2, gt=0)
    macd_s: int = Field(default=12, gt=0)
    macd_l: int = Field(default=26, gt=0)
    macd_m: int = Field(default=9, gt=0)
    kdj_n: int = Field(default=9, gt=0)
    kdj_m1: int = Field(default=3, gt=0)
    kdj_m2: int = Field(default=3, gt=0)
    rsi_list: list[PeriodSlot] = Field(default_factory=list)
    wr_list: list[PeriodSlot] = Field(default_factory=list)

    primary: MainIndicator = MainIndicator.MA
    second: SubIndicator = SubIndicator.MACD

    @field_serializer(
        "boll_n", "boll_p", "macd_s", "macd_l", "macd_m", "kdj_n", "kdj_m1", "kdj_m2"
    )
    def _param_as_text(self, value: int) -> str:
        return str(value)

    @model_validator(mode="after")
    def _check_slots(self) -> "IndicatorConfig":
        families = (
            ("ma_list", self.ma_list, MA_SLOTS),
            ("ma_volume_list", self.ma_volume_list, VOLUME_MA_SLOTS),
            ("rsi_list", self.rsi_list, RSI_SLOTS),
            ("wr_list", self.wr_list, WR_SLOTS),
        )
        for name, slots, capacity in families:
            indexes = [slot.index for slot in slots]
            if len(indexes) != len(set(indexes)):
                raise ValueError(f"{name}: duplicate slot index in {indexes}")
            if any(index >= capacity for index in indexes):
                raise ValueError(f"{name}: slot index out of range 0..{capacity - 1}")
        return self

    @staticmethod
    def selected(slots: list[PeriodSlot]) -> list[PeriodSlot]:
        """Requested slots of a family, in slot order."""
        return sorted((slot for slot in slots if slot.selected), key=lambda s: s.index)

    @classmethod
    def default(
        cls,
        primary: MainIndicator = MainIndicator.MA,
        second: SubIndicator = SubIndicator.MACD,
    ) -> "IndicatorConfig":
        """Standard target list for the given pane selection."""
        return cls(
            ma_list=_slots([5, 10, 20], primary == MainIndicator.MA),
            ma_volume_list=_slots([5, 10], True),
            rsi_list=_slots([6, 12, 24], second == SubIndicator.RSI),
            wr_list=_slots([14], second == SubIndicator.WR),
            primary=primary,
            second=second,
        )


# =============================================================================
# INPUT: IndicatorRequest
# =============================================================================


class IndicatorRequest(WireModel):
    """
    Request for indicator enrichment.
    Sent by: Chart Service / API
    Received by: Indicator Service
    """

    bars: list[Bar]
    config: Optional[IndicatorConfig] = None
