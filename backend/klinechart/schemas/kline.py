"""
CONTRACT 1: K-Line Series

Input: Bar (raw OHLCV sample from the data source)
Output: EnrichedBar (bar + indicator fields + display rows)

Wire names are camelCase so the serialized series can be handed to the
native chart view as-is.
"""

from typing import Optional, Union
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    FieldSerializationInfo,
    field_serializer,
    field_validator,
)
from pydantic.alias_generators import to_camel


# Fixed slot capacity per multi-period family
MA_SLOTS = 3
VOLUME_MA_SLOTS = 2
RSI_SLOTS = 3
WR_SLOTS = 1

SLOT_CAPACITY = {
    "ma_list": MA_SLOTS,
    "ma_volume_list": VOLUME_MA_SLOTS,
    "rsi_list": RSI_SLOTS,
    "wr_list": WR_SLOTS,
}


class WireModel(BaseModel):
    """Base model with camelCase wire names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# INPUT: Bar
# =============================================================================


class Bar(WireModel):
    """Single candlestick sample. Immutable once produced."""

    model_config = ConfigDict(frozen=True)

    time: int = Field(..., description="Epoch milliseconds, unique and increasing")
    open: float
    high: float
    low: float
    close: float
    volume: float = Field(..., ge=0)


# =============================================================================
# OUTPUT: EnrichedBar Components
# =============================================================================


class IndicatorValue(WireModel):
    """One period's value inside a multi-period family (MA, VOL MA, RSI, WR)."""

    value: float
    label: str = Field(..., alias="title", description="Period as text, e.g. '5'")
    index: int = Field(..., ge=0, description="Slot the value was written to")


class DisplayRow(WireModel):
    """One label/value line of the selected-bar detail panel."""

    title: str
    detail: str
    color: Optional[Union[int, str]] = None


SlotMap = dict[int, IndicatorValue]


class EnrichedBar(Bar):
    """
    A bar extended with indicator fields.

    Multi-period families are stored as slot -> value maps; a slot the
    configuration did not request is simply missing. On the wire each map
    becomes a fixed-capacity list with null holes.
    """

    id: int
    vol: float

    # Multi-period families
    ma_list: Optional[SlotMap] = None
    ma_volume_list: Optional[SlotMap] = None
    rsi_list: Optional[SlotMap] = None
    wr_list: Optional[SlotMap] = None

    # BOLL
    boll_mb: Optional[float] = None
    boll_up: Optional[float] = None
    boll_dn: Optional[float] = None

    # MACD
    macd_dif: Optional[float] = None
    macd_dea: Optional[float] = None
    macd_value: Optional[float] = None

    # KDJ
    kdj_k: Optional[float] = None
    kdj_d: Optional[float] = None
    kdj_j: Optional[float] = None

    # Display
    date_string: Optional[str] = None
    selected_item_list: list[DisplayRow] = Field(default_factory=list)

    @field_validator("ma_list", "ma_volume_list", "rsi_list", "wr_list", mode="before")
    @classmethod
    def _slots_from_wire(cls, value):
        if isinstance(value, list):
            return {slot: item for slot, item in enumerate(value) if item is not None}
        return value

    @field_serializer("ma_list", "ma_volume_list", "rsi_list", "wr_list")
    def _slots_to_wire(
        self, slots: Optional[SlotMap], info: FieldSerializationInfo
    ) -> Optional[list[Optional[IndicatorValue]]]:
        if slots is None:
            return None
        capacity = SLOT_CAPACITY[info.field_name]
        return [slots.get(slot) for slot in range(capacity)]
