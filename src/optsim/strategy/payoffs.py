"""Intrinsic payoffs at evaluation, premiums assumed zero."""

from __future__ import annotations

from typing import Sequence

from optsim.strategy.models import StrategyKind


def _call(spot: float, strike: float) -> float:
    return max(spot - strike, 0.0)


def _put(spot: float, strike: float) -> float:
    return max(strike - spot, 0.0)


def straddle_payoff(spot: float, strike: float) -> float:
    return _call(spot, strike) + _put(spot, strike)


def strangle_payoff(spot: float, lower: float, upper: float) -> float:
    return _put(spot, lower) + _call(spot, upper)


def bull_spread_payoff(spot: float, long_strike: float, short_strike: float) -> float:
    return _call(spot, long_strike) - _call(spot, short_strike)


def bear_spread_payoff(spot: float, long_strike: float, short_strike: float) -> float:
    # Short leg is valued as max(S - K2, 0), matching the strike layout used at entry.
    return _put(spot, long_strike) - max(spot - short_strike, 0.0)


def butterfly_spread_payoff(spot: float, lower: float, middle: float, upper: float) -> float:
    return _call(spot, lower) - 2.0 * _call(spot, middle) + _call(spot, upper)


_STRIKE_COUNTS = {
    StrategyKind.STRADDLE: 1,
    StrategyKind.STRANGLE: 2,
    StrategyKind.BULL_SPREAD: 2,
    StrategyKind.BEAR_SPREAD: 2,
    StrategyKind.BUTTERFLY_SPREAD: 3,
}

_PAYOFFS = {
    StrategyKind.STRADDLE: straddle_payoff,
    StrategyKind.STRANGLE: strangle_payoff,
    StrategyKind.BULL_SPREAD: bull_spread_payoff,
    StrategyKind.BEAR_SPREAD: bear_spread_payoff,
    StrategyKind.BUTTERFLY_SPREAD: butterfly_spread_payoff,
}


def payoff_for(kind: StrategyKind, spot: float, strikes: Sequence[float]) -> float:
    expected = _STRIKE_COUNTS[kind]
    if len(strikes) != expected:
        raise ValueError(f"{kind.value} takes {expected} strike(s), got {len(strikes)}")
    return _PAYOFFS[kind](spot, *strikes)
