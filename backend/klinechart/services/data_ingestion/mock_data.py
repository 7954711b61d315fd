"""
Mock Data Generator

Generates a random-walk K-line series for the demo chart.
"""

import random
import time
from typing import Optional

from klinechart.schemas.kline import Bar

# 2% body volatility, shadows up to 1% of open, drop capped at 5%
BODY_VOLATILITY = 0.02
SHADOW_RATIO = 0.01
MAX_DROP = 0.95


def generate_mock_bars(
    count: int = 200,
    start_price: float = 50000.0,
    interval_ms: int = 900_000,
    end_time_ms: Optional[int] = None,
    seed: Optional[int] = None,
) -> list[Bar]:
    """
    Generate mock OHLCV bars.

    Each bar opens at the previous close, so the series is continuous.
    The last bar starts one interval before `end_time_ms` (default: now).
    """
    rng = random.Random(seed)
    if end_time_ms is None:
        end_time_ms = int(time.time() * 1000)

    bars = []
    last_close = start_price

    for i in range(count):
        open_price = last_close
        change = (rng.random() - 0.5) * open_price * BODY_VOLATILITY
        close_price = max(open_price + change, open_price * MAX_DROP)

        high_price = max(open_price, close_price) + rng.random() * open_price * SHADOW_RATIO
        low_price = min(open_price, close_price) - rng.random() * open_price * SHADOW_RATIO
        volume = (0.5 + rng.random()) * 1_000_000

        bars.append(
            Bar(
                time=end_time_ms - (count - i) * interval_ms,
                open=round(open_price, 2),
                high=round(high_price, 2),
                low=round(low_price, 2),
                close=round(close_price, 2),
                volume=round(volume, 2),
            )
        )

        last_close = close_price

    return bars
