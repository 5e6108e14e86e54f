"""Alpha signal rules, one per strategy."""

from __future__ import annotations

from enum import Enum

from optsim.config.models import StrategyParams
from optsim.strategy.indicators import IndicatorSnapshot
from optsim.strategy.models import StrategyKind


class AlphaSignal(str, Enum):
    ENTER = "enter"
    EXIT = "exit"
    NEUTRAL = "neutral"


def volatility_band_signal(vol: float, high: float, low: float) -> AlphaSignal:
    if vol > high:
        return AlphaSignal.ENTER
    if vol < low:
        return AlphaSignal.EXIT
    return AlphaSignal.NEUTRAL


def straddle_signal(snapshot: IndicatorSnapshot, params: StrategyParams) -> AlphaSignal:
    return volatility_band_signal(snapshot.volatility, params.straddle_high, params.straddle_low)


def strangle_signal(snapshot: IndicatorSnapshot, params: StrategyParams) -> AlphaSignal:
    return volatility_band_signal(snapshot.volatility, params.strangle_high, params.strangle_low)


def bull_spread_signal(snapshot: IndicatorSnapshot, params: StrategyParams) -> AlphaSignal:
    if snapshot.short_ma > snapshot.long_ma:
        return AlphaSignal.ENTER
    return AlphaSignal.EXIT


def bear_spread_signal(snapshot: IndicatorSnapshot, params: StrategyParams) -> AlphaSignal:
    if snapshot.short_ma < snapshot.long_ma:
        return AlphaSignal.ENTER
    return AlphaSignal.EXIT


def butterfly_spread_signal(snapshot: IndicatorSnapshot, params: StrategyParams) -> AlphaSignal:
    # Low-volatility regime shares the straddle exit threshold.
    if snapshot.volatility < params.straddle_low:
        return AlphaSignal.ENTER
    return AlphaSignal.EXIT


SIGNAL_RULES = {
    StrategyKind.STRADDLE: straddle_signal,
    StrategyKind.STRANGLE: strangle_signal,
    StrategyKind.BULL_SPREAD: bull_spread_signal,
    StrategyKind.BEAR_SPREAD: bear_spread_signal,
    StrategyKind.BUTTERFLY_SPREAD: butterfly_spread_signal,
}


def generate_signals(snapshot: IndicatorSnapshot, params: StrategyParams) -> dict[StrategyKind, AlphaSignal]:
    return {kind: rule(snapshot, params) for kind, rule in SIGNAL_RULES.items()}
