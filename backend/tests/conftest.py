"""Shared fixtures: bar series builders."""
from typing import Optional

import pytest

from klinechart.schemas.kline import Bar

BASE_TIME = 1_700_000_000_000
INTERVAL = 60_000


def _series(
    closes: list[float],
    opens: Optional[list[float]] = None,
    highs: Optional[list[float]] = None,
    lows: Optional[list[float]] = None,
    volumes: Optional[list[float]] = None,
) -> list[Bar]:
    opens = opens or closes
    highs = highs or [max(o, c) for o, c in zip(opens, closes)]
    lows = lows or [min(o, c) for o, c in zip(opens, closes)]
    volumes = volumes or [1000.0] * len(closes)
    return [
        Bar(
            time=BASE_TIME + i * INTERVAL,
            open=opens[i],
            high=highs[i],
            low=lows[i],
            close=closes[i],
            volume=volumes[i],
        )
        for i in range(len(closes))
    ]


@pytest.fixture
def make_bars():
    """Factory: make_bars(closes, opens=, highs=, lows=, volumes=) -> list[Bar]."""
    return _series


@pytest.fixture
def ramp_bars():
    """30 bars with closes 100, 101, ..., 129."""
    return _series([float(100 + i) for i in range(30)])


@pytest.fixture
def constant_bars():
    """40 bars with open = high = low = close = 250."""
    return _series([250.0] * 40)
