"""Indicators, signals, payoffs and trade lifecycles."""

from optsim.strategy.indicators import (
    IndicatorSnapshot,
    compute_snapshot,
    moving_average,
    volatility,
)
from optsim.strategy.lifecycle import TradeLifecycle
from optsim.strategy.models import ClosedTrade, ExitReason, StrategyKind, Trade, TradeState
from optsim.strategy.payoffs import (
    bear_spread_payoff,
    bull_spread_payoff,
    butterfly_spread_payoff,
    payoff_for,
    straddle_payoff,
    strangle_payoff,
)
from optsim.strategy.signals import AlphaSignal, generate_signals
from optsim.strategy.specs import StrategySpec, build_strategy_specs, build_strikes

__all__ = [
    "AlphaSignal",
    "ClosedTrade",
    "ExitReason",
    "IndicatorSnapshot",
    "StrategyKind",
    "StrategySpec",
    "Trade",
    "TradeLifecycle",
    "TradeState",
    "bear_spread_payoff",
    "build_strategy_specs",
    "build_strikes",
    "bull_spread_payoff",
    "butterfly_spread_payoff",
    "compute_snapshot",
    "generate_signals",
    "moving_average",
    "payoff_for",
    "straddle_payoff",
    "strangle_payoff",
    "volatility",
]
