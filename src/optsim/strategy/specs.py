"""Per-strategy rule bundles: signal, strike layout and payoff."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from optsim.config.models import StrategyParams
from optsim.strategy.indicators import IndicatorSnapshot
from optsim.strategy.models import StrategyKind
from optsim.strategy.payoffs import payoff_for
from optsim.strategy.signals import SIGNAL_RULES, AlphaSignal


def build_strikes(kind: StrategyKind, spot: float, offset: float) -> tuple[float, ...]:
    lower = spot * (1 - offset)
    upper = spot * (1 + offset)
    if kind == StrategyKind.STRADDLE:
        return (spot,)
    if kind in (StrategyKind.STRANGLE, StrategyKind.BULL_SPREAD):
        return (lower, upper)
    if kind == StrategyKind.BEAR_SPREAD:
        # Long put above spot, short put below.
        return (upper, lower)
    if kind == StrategyKind.BUTTERFLY_SPREAD:
        return (lower, spot, upper)
    raise ValueError(f"Unknown strategy: {kind}")


@dataclass(frozen=True)
class StrategySpec:
    kind: StrategyKind
    params: StrategyParams
    signal_rule: Callable[[IndicatorSnapshot, StrategyParams], AlphaSignal]

    def signal(self, snapshot: IndicatorSnapshot) -> AlphaSignal:
        return self.signal_rule(snapshot, self.params)

    def strikes(self, spot: float) -> tuple[float, ...]:
        return build_strikes(self.kind, spot, self.params.strike_offset)

    def payoff(self, spot: float, strikes: Sequence[float]) -> float:
        return payoff_for(self.kind, spot, strikes)


def build_strategy_specs(params: StrategyParams) -> dict[StrategyKind, StrategySpec]:
    return {
        kind: StrategySpec(kind=kind, params=params, signal_rule=SIGNAL_RULES[kind])
        for kind in StrategyKind
    }
