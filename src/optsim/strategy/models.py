"""Strategy and trade models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StrategyKind(str, Enum):
    STRADDLE = "straddle"
    STRANGLE = "strangle"
    BULL_SPREAD = "bull_spread"
    BEAR_SPREAD = "bear_spread"
    BUTTERFLY_SPREAD = "butterfly_spread"

    @property
    def strategy_id(self) -> int:
        return list(StrategyKind).index(self) + 1

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class TradeState(str, Enum):
    FLAT = "flat"
    OPEN = "open"


class ExitReason(str, Enum):
    HOLD_EXPIRED = "hold_expired"
    EXIT_SIGNAL = "exit_signal"


@dataclass(frozen=True)
class Trade:
    kind: StrategyKind
    entry_tick: int
    entry_price: float
    strikes: tuple[float, ...]
    volume: int


@dataclass(frozen=True)
class ClosedTrade:
    kind: StrategyKind
    entry_tick: int
    exit_tick: int
    entry_price: float
    exit_price: float
    strikes: tuple[float, ...]
    volume: int
    payoff: float
    pnl: float
    reason: ExitReason

    @property
    def held_ticks(self) -> int:
        return self.exit_tick - self.entry_tick
