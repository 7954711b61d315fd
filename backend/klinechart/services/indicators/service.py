"""
Indicator Engine Service Implementation

Runs the configured indicator calculators over a whole series and merges
their output into EnrichedBar records. Pure Python/NumPy calculations.
"""

import logging
from typing import Callable, Optional
import numpy as np

from klinechart.schemas.kline import Bar, EnrichedBar, IndicatorValue
from klinechart.schemas.indicators import (
    IndicatorConfig,
    IndicatorRequest,
    MainIndicator,
    PeriodSlot,
    SubIndicator,
)
from klinechart.services.indicators.interface import IndicatorServiceInterface
from klinechart.services.indicators.calculations import (
    moving_average,
    bollinger_bands,
    macd,
    kdj,
    rsi,
    williams_r,
)

logger = logging.getLogger(__name__)

# Per-bar fields produced by the calculators, keyed by EnrichedBar attribute
BarFields = list[dict]

_OHLCV_FIELDS = {"time", "open", "high", "low", "close", "volume"}


def _bars_to_arrays(bars: list[Bar]) -> tuple:
    """Convert a bar list to numpy arrays."""
    opens = np.array([b.open for b in bars], dtype=float)
    highs = np.array([b.high for b in bars], dtype=float)
    lows = np.array([b.low for b in bars], dtype=float)
    closes = np.array([b.close for b in bars], dtype=float)
    volumes = np.array([b.volume for b in bars], dtype=float)
    return opens, highs, lows, closes, volumes


def _merge_series(fields: BarFields, **series: np.ndarray) -> None:
    """Write scalar series (one value per bar) into the per-bar fields."""
    for name, values in series.items():
        for record, value in zip(fields, values.tolist()):
            record[name] = value


def _merge_slots(
    fields: BarFields,
    name: str,
    slots: list[PeriodSlot],
    calculate: Callable[[int], np.ndarray],
) -> None:
    """Run one calculator per requested slot and fill the family's slot map."""
    for record in fields:
        record[name] = {}

    for slot in slots:
        values = calculate(slot.period).tolist()
        label = str(slot.period)
        for record, value in zip(fields, values):
            record[name][slot.index] = IndicatorValue(
                value=value, label=label, index=slot.index
            )


class IndicatorService(IndicatorServiceInterface):
    """
    Indicator Engine Service.

    Calculator order: MA -> VOL MA -> BOLL -> MACD -> KDJ -> RSI -> WR.
    Multi-period families run when any of their slots is selected;
    BOLL/MACD/KDJ run only when selected on their pane.
    """

    async def execute(self, input_data: IndicatorRequest) -> list[EnrichedBar]:
        config = input_data.config or IndicatorConfig.default()
        return self.enrich(input_data.bars, config)

    def enrich(self, bars: list[Bar], config: IndicatorConfig) -> list[EnrichedBar]:
        """Calculate the configured indicators for every bar."""
        _, highs, lows, closes, volumes = _bars_to_arrays(bars)
        fields: BarFields = [{} for _ in bars]
        ran = []

        ma_slots = config.selected(config.ma_list)
        if ma_slots:
            _merge_slots(
                fields, "ma_list", ma_slots, lambda period: moving_average(closes, period)
            )
            ran.append("MA")

        volume_slots = config.selected(config.ma_volume_list)
        if volume_slots:
            _merge_slots(
                fields,
                "ma_volume_list",
                volume_slots,
                lambda period: moving_average(volumes, period),
            )
            ran.append("VOL")

        if config.primary == MainIndicator.BOLL:
            mid, up, dn = bollinger_bands(closes, config.boll_n, config.boll_p)
            _merge_series(fields, boll_mb=mid, boll_up=up, boll_dn=dn)
            ran.append("BOLL")

        if config.second == SubIndicator.MACD:
            dif, dea, hist = macd(closes, config.macd_s, config.macd_l, config.macd_m)
            _merge_series(fields, macd_dif=dif, macd_dea=dea, macd_value=hist)
            ran.append("MACD")

        if config.second == SubIndicator.KDJ:
            k, d, j = kdj(highs, lows, closes, config.kdj_n, config.kdj_m1, config.kdj_m2)
            _merge_series(fields, kdj_k=k, kdj_d=d, kdj_j=j)
            ran.append("KDJ")

        rsi_slots = config.selected(config.rsi_list)
        if rsi_slots:
            _merge_slots(fields, "rsi_list", rsi_slots, lambda period: rsi(closes, period))
            ran.append("RSI")

        wr_slots = config.selected(config.wr_list)
        if wr_slots:
            _merge_slots(
                fields,
                "wr_list",
                wr_slots,
                lambda period: williams_r(highs, lows, closes, period),
            )
            ran.append("WR")

        logger.debug(f"Enriched {len(bars)} bars with {', '.join(ran) or 'no indicators'}")

        return [
            EnrichedBar(
                **bar.model_dump(include=_OHLCV_FIELDS),
                id=bar.time,
                vol=bar.volume,
                **record,
            )
            for bar, record in zip(bars, fields)
        ]


# Singleton instance
_service_instance: Optional[IndicatorService] = None


def get_indicator_service() -> IndicatorService:
    """Get or create indicator service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = IndicatorService()
    return _service_instance
