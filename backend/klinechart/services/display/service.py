"""
Display Row Builder

Turns enriched bars into the label/value rows shown in the selected-bar
detail panel.
"""

import logging
from datetime import tzinfo
from typing import Optional

from klinechart.schemas.kline import DisplayRow, EnrichedBar, SlotMap
from klinechart.schemas.indicators import IndicatorConfig, MainIndicator, SubIndicator
from klinechart.schemas.chart import ColorList
from klinechart.services.display.formatter import (
    UNAVAILABLE,
    fix_round,
    format_timestamp,
)

logger = logging.getLogger(__name__)

MACD_PRECISION = 4
OSCILLATOR_PRECISION = 2
PERCENT_PRECISION = 2


def _slot_rows(prefix: str, slots: Optional[SlotMap], precision: int) -> list[DisplayRow]:
    if not slots:
        return []
    return [
        DisplayRow(title=f"{prefix}{item.label}", detail=fix_round(item.value, precision))
        for _, item in sorted(slots.items())
    ]


class DisplayService:
    """
    Display Row Builder.

    Base rows (time, OHLC, change, change %, volume) for every bar, then
    rows for the indicator selected on each pane.
    """

    def build_rows(
        self,
        bar: EnrichedBar,
        config: IndicatorConfig,
        price_precision: int,
        volume_precision: int,
        color_list: ColorList,
        time_pattern: str = "MM-DD HH:mm",
        tz: Optional[tzinfo] = None,
    ) -> list[DisplayRow]:
        """Build the detail rows for one bar."""
        change = bar.close - bar.open
        change_percent = change / bar.open * 100 if bar.open else None
        is_increase = change >= 0
        color = color_list.increase_color if is_increase else color_list.decrease_color

        change_text = fix_round(abs(change), price_precision, True, False, is_increase)
        percent_text = UNAVAILABLE
        if change_percent is not None:
            percent_text = (
                fix_round(abs(change_percent), PERCENT_PRECISION, True, False, is_increase)
                + "%"
            )

        rows = [
            DisplayRow(title="Time", detail=format_timestamp(bar.time, time_pattern, tz)),
            DisplayRow(title="Open", detail=fix_round(bar.open, price_precision)),
            DisplayRow(title="High", detail=fix_round(bar.high, price_precision)),
            DisplayRow(title="Low", detail=fix_round(bar.low, price_precision)),
            DisplayRow(title="Close", detail=fix_round(bar.close, price_precision)),
            DisplayRow(title="Change", detail=change_text, color=color),
            DisplayRow(title="Change %", detail=percent_text, color=color),
            DisplayRow(
                title="Volume",
                detail=fix_round(bar.volume, volume_precision, show_grouping=True),
            ),
        ]

        rows.extend(self._main_rows(bar, config.primary, price_precision))
        rows.extend(self._sub_rows(bar, config.second))
        return rows

    def _main_rows(
        self, bar: EnrichedBar, primary: MainIndicator, price_precision: int
    ) -> list[DisplayRow]:
        if primary == MainIndicator.MA:
            return _slot_rows("MA", bar.ma_list, price_precision)

        if primary == MainIndicator.BOLL and bar.boll_mb is not None:
            return [
                DisplayRow(title="BOLL Upper", detail=fix_round(bar.boll_up, price_precision)),
                DisplayRow(title="BOLL Mid", detail=fix_round(bar.boll_mb, price_precision)),
                DisplayRow(title="BOLL Lower", detail=fix_round(bar.boll_dn, price_precision)),
            ]
        return []

    def _sub_rows(self, bar: EnrichedBar, second: SubIndicator) -> list[DisplayRow]:
        if second == SubIndicator.MACD and bar.macd_dif is not None:
            return [
                DisplayRow(title="DIF", detail=fix_round(bar.macd_dif, MACD_PRECISION)),
                DisplayRow(title="DEA", detail=fix_round(bar.macd_dea, MACD_PRECISION)),
                DisplayRow(title="MACD", detail=fix_round(bar.macd_value, MACD_PRECISION)),
            ]

        if second == SubIndicator.KDJ and bar.kdj_k is not None:
            return [
                DisplayRow(title="K", detail=fix_round(bar.kdj_k, OSCILLATOR_PRECISION)),
                DisplayRow(title="D", detail=fix_round(bar.kdj_d, OSCILLATOR_PRECISION)),
                DisplayRow(title="J", detail=fix_round(bar.kdj_j, OSCILLATOR_PRECISION)),
            ]

        if second == SubIndicator.RSI:
            return _slot_rows("RSI", bar.rsi_list, OSCILLATOR_PRECISION)

        if second == SubIndicator.WR:
            return _slot_rows("WR", bar.wr_list, OSCILLATOR_PRECISION)

        return []

    def decorate(
        self,
        bars: list[EnrichedBar],
        config: IndicatorConfig,
        price_precision: int,
        volume_precision: int,
        color_list: ColorList,
        time_pattern: str = "MM-DD HH:mm",
        tz: Optional[tzinfo] = None,
    ) -> list[EnrichedBar]:
        """Return copies of `bars` with date_string and selected_item_list set."""
        decorated = []
        for bar in bars:
            rows = self.build_rows(
                bar, config, price_precision, volume_precision, color_list, time_pattern, tz
            )
            decorated.append(
                bar.model_copy(
                    update={
                        "date_string": rows[0].detail,
                        "selected_item_list": rows,
                    }
                )
            )

        logger.debug(
            f"Built display rows for {len(decorated)} bars "
            f"(main={config.primary.label}, sub={config.second.label})"
        )
        return decorated


# Singleton instance
_service_instance: Optional[DisplayService] = None


def get_display_service() -> DisplayService:
    """Get or create display service instance."""
    global _service_instance
    if _service_instance is None:
        _service_instance = DisplayService()
    return _service_instance
