"""
Technical Indicator Calculations

Pure Python/NumPy implementations of the chart indicators.
Every function takes whole-series arrays and returns same-length arrays.
Bars without enough history get a fixed placeholder, never NaN.
"""

import numpy as np
from dataclasses import dataclass
from itertools import accumulate


def _window_start(index: int, period: int) -> int:
    """First index of the trailing window ending at `index` (clamped to 0)."""
    return max(0, index - period + 1)


# =============================================================================
# MOVING AVERAGES
# =============================================================================


def moving_average(values: np.ndarray, period: int) -> np.ndarray:
    """
    Simple Moving Average.

    Warm-up (index < period - 1): the bar's own value.
    Used for both close MA and volume MA.
    """
    values = np.asarray(values, dtype=float)
    result = values.copy()

    for i in range(period - 1, len(values)):
        result[i] = np.mean(values[_window_start(i, period) : i + 1])
    return result


def bollinger_bands(
    closes: np.ndarray, n: int = 20, p: float = 2
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Bollinger Bands with sample standard deviation (n - 1 divisor).

    Returns: (mid, up, dn)
    """
    closes = np.asarray(closes, dtype=float)
    mid = closes.copy()
    up = closes.copy()
    dn = closes.copy()

    for i in range(n - 1, len(closes)):
        window = closes[_window_start(i, n) : i + 1]
        ma = np.mean(window)
        std = np.std(window, ddof=1) if n > 1 else 0.0

        mid[i] = ma
        up[i] = ma + p * std
        dn[i] = ma - p * std

    return mid, up, dn


# =============================================================================
# MACD
# =============================================================================


@dataclass(frozen=True)
class MACDState:
    """Accumulator carried through the MACD scan."""

    ema_short: float
    ema_long: float
    dif: float
    dea: float


def _smooth(prev: float, value: float, period: int) -> float:
    """Recursive EMA update: (2 * value + (period - 1) * prev) / (period + 1)."""
    return (2 * value + (period - 1) * prev) / (period + 1)


def macd(
    closes: np.ndarray, s: int = 12, l: int = 26, m: int = 9
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    MACD (Moving Average Convergence Divergence).

    Both EMAs are seeded with the first close, DEA with 0.
    First bar is all zeros.

    Returns: (dif, dea, macd)
    """
    closes = np.asarray(closes, dtype=float)
    if len(closes) == 0:
        empty = np.array([], dtype=float)
        return empty, empty.copy(), empty.copy()

    def step(state: MACDState, close: float) -> MACDState:
        ema_short = _smooth(state.ema_short, close, s)
        ema_long = _smooth(state.ema_long, close, l)
        dif = ema_short - ema_long
        return MACDState(ema_short, ema_long, dif, _smooth(state.dea, dif, m))

    seed = MACDState(float(closes[0]), float(closes[0]), 0.0, 0.0)
    states = list(accumulate(closes[1:].tolist(), step, initial=seed))

    dif = np.array([state.dif for state in states])
    dea = np.array([state.dea for state in states])
    return dif, dea, 2 * (dif - dea)


# =============================================================================
# OSCILLATORS
# =============================================================================


@dataclass(frozen=True)
class KDJState:
    """Accumulator carried through the KDJ scan."""

    k: float
    d: float


def raw_stochastic_value(
    highs: np.ndarray, lows: np.ndarray, closes: np.ndarray, n: int = 9
) -> np.ndarray:
    """RSV over the clamped trailing n bars; 50 when the range is flat."""
    highs = np.asarray(highs, dtype=float)
    lows = np.asarray(lows, dtype=float)
    closes = np.asarray(closes, dtype=float)
    result = np.full(len(closes), 50.0)

    for i in range(len(closes)):
        start = _window_start(i, n)
        highest = np.max(highs[start : i + 1])
        lowest = np.min(lows[start : i + 1])

        if highest != lowest:
            result[i] = (closes[i] - lowest) / (highest - lowest) * 100

    return result


def kdj(
    highs: np.ndarray,
    lows: np.ndarray,
    closes: np.ndarray,
    n: int = 9,
    m1: int = 3,
    m2: int = 3,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    KDJ stochastic oscillator.

    K and D start at 50 on the first bar, where J = 3K - 2D.

    Returns: (k, d, j)
    """
    rsv = raw_stochastic_value(highs, lows, closes, n)
    if len(rsv) == 0:
        empty = np.array([], dtype=float)
        return empty, empty.copy(), empty.copy()

    def step(state: KDJState, value: float) -> KDJState:
        k = (value + (m1 - 1) * state.k) / m1
        d = (k + (m1 - 1) * state.d) / m1
        return KDJState(k, d)

    states = list(accumulate(rsv[1:].tolist(), step, initial=KDJState(50.0, 50.0)))

    k = np.array([state.k for state in states])
    d = np.array([state.d for state in states])
    j = m2 * k - 2 * d
    j[0] = 3 * k[0] - 2 * d[0]
    return k, d, j


def rsi(closes: np.ndarray, period: int = 14) -> np.ndarray:
    """
    Relative Strength Index over plain sums of the trailing `period` deltas.

    Warm-up (index < period): 50.
    No losses in the window: rs is pinned to 100 (RSI ~ 99.01).
    """
    closes = np.asarray(closes, dtype=float)
    result = np.full(len(closes), 50.0)
    deltas = np.diff(closes)

    for i in range(max(period, 1), len(closes)):
        # deltas[i - 1] is close[i] - close[i - 1]
        window = deltas[i - period : i]
        gains = np.sum(window[window > 0])
        losses = -np.sum(window[window < 0])

        avg_gain = gains / period
        avg_loss = losses / period
        rs = 100 if avg_loss == 0 else avg_gain / avg_loss
        result[i] = 100 - 100 / (1 + rs)

    return result


def williams_r(
    highs: np.ndarray, lows: np.ndarray, closes: np.ndarray, period: int = 14
) -> np.ndarray:
    """Williams %R. Warm-up (index < period - 1) and flat range: -50."""
    highs = np.asarray(highs, dtype=float)
    lows = np.asarray(lows, dtype=float)
    closes = np.asarray(closes, dtype=float)
    result = np.full(len(closes), -50.0)

    for i in range(period - 1, len(closes)):
        start = _window_start(i, period)
        highest_high = np.max(highs[start : i + 1])
        lowest_low = np.min(lows[start : i + 1])

        if highest_high != lowest_low:
            result[i] = -100 * (highest_high - closes[i]) / (highest_high - lowest_low)

    return result
