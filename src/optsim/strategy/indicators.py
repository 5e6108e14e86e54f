"""Trailing-window indicators over the price history.

Every value is derived from the slice of the series ending at ``tick``; nothing
past ``tick`` is read.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from optsim.config.models import IndicatorParams


@dataclass(frozen=True)
class IndicatorSnapshot:
    short_ma: float
    long_ma: float
    volatility: float


def moving_average(series: Sequence[float], tick: int, window: int) -> float:
    """Simple moving average of the ``window`` prices ending at ``tick``.

    Before the window fills up the price at ``tick`` is returned as is, with no
    partial-window averaging.
    """
    if tick < window - 1:
        return series[tick]
    total = 0.0
    for index in range(tick - window + 1, tick + 1):
        total += series[index]
    return total / window


def volatility(series: Sequence[float], tick: int, window: int) -> float:
    """Population standard deviation of log returns over the trailing window.

    Returns 0 until ``tick`` reaches ``window``. A return is only formed when
    the lower index is not 0, and the variance divides by the number of
    returns actually collected.
    """
    if tick < window:
        return 0.0
    returns: list[float] = []
    for index in range(tick - window + 1, tick + 1):
        if index == 0:
            continue
        returns.append(math.log(series[index] / series[index - 1]))
    if not returns:
        return 0.0
    mean = sum(returns) / len(returns)
    variance = sum((value - mean) ** 2 for value in returns) / len(returns)
    return math.sqrt(variance)


def compute_snapshot(series: Sequence[float], tick: int, params: IndicatorParams) -> IndicatorSnapshot:
    if tick >= len(series):
        raise IndexError(f"tick {tick} is beyond the price history ({len(series)} points)")
    return IndicatorSnapshot(
        short_ma=moving_average(series, tick, params.short_window),
        long_ma=moving_average(series, tick, params.long_window),
        volatility=volatility(series, tick, params.vol_window),
    )
