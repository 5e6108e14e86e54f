"""Simulation data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

from optsim.strategy.indicators import IndicatorSnapshot
from optsim.strategy.models import ClosedTrade, StrategyKind, Trade
from optsim.strategy.signals import AlphaSignal


class SimulationError(RuntimeError):
    """Fatal numerical fault; the run is aborted."""


@dataclass(frozen=True)
class TickRecord:
    tick: int
    price: float
    snapshot: IndicatorSnapshot
    signals: dict[StrategyKind, AlphaSignal]
    cumulative_pnl: dict[StrategyKind, float]
    total_pnl: float


@dataclass(frozen=True)
class SimulationResult:
    prices: list[float]
    pnl: dict[StrategyKind, float]
    trades: list[ClosedTrade]
    open_trades: dict[StrategyKind, Trade]
    ticks: list[TickRecord] = field(default_factory=list)
    seed: int | None = None

    @property
    def total_pnl(self) -> float:
        return sum(self.pnl.values())

    def pnl_by_id(self) -> dict[int, float]:
        return {kind.strategy_id: value for kind, value in self.pnl.items()}

    def trades_for(self, kind: StrategyKind) -> list[ClosedTrade]:
        return [trade for trade in self.trades if trade.kind == kind]


@dataclass(frozen=True)
class BatchSummary:
    runs: int
    mean_pnl: dict[StrategyKind, float]
    mean_total: float
    min_total: float
    max_total: float
    profitable_share: float
