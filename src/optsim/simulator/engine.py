"""Tick loop driving the price path and the five strategy lifecycles."""

from __future__ import annotations

from typing import Optional

from optsim.config.loader import validate_config
from optsim.config.models import BacktestConfig
from optsim.monitoring.audit import AuditLog
from optsim.monitoring.monitor import Monitor
from optsim.simulator.models import SimulationError, SimulationResult, TickRecord
from optsim.simulator.price import GaussianShocks, PriceProcess, ShockSource
from optsim.strategy.indicators import compute_snapshot
from optsim.strategy.lifecycle import TradeLifecycle
from optsim.strategy.models import ClosedTrade, StrategyKind
from optsim.strategy.specs import build_strategy_specs


class PnLLedger:
    """Cumulative realized PnL per strategy, updated only when a trade closes."""

    def __init__(self) -> None:
        self._pnl: dict[StrategyKind, float] = {kind: 0.0 for kind in StrategyKind}
        self.trades: list[ClosedTrade] = []

    def record(self, trade: ClosedTrade) -> None:
        self._pnl[trade.kind] += trade.pnl
        self.trades.append(trade)

    def get(self, kind: StrategyKind) -> float:
        return self._pnl[kind]

    @property
    def table(self) -> dict[StrategyKind, float]:
        return dict(self._pnl)

    @property
    def total(self) -> float:
        return sum(self._pnl.values())

    def by_id(self) -> dict[int, float]:
        return {kind.strategy_id: value for kind, value in self._pnl.items()}


class BacktestSimulator:
    def __init__(
        self,
        config: BacktestConfig,
        shocks: Optional[ShockSource] = None,
        audit_log: Optional[AuditLog] = None,
        monitor: Optional[Monitor] = None,
        record_ticks: bool = False,
        run_id: str = "adhoc",
    ) -> None:
        self.config = validate_config(config)
        self.shocks = shocks if shocks is not None else GaussianShocks(config.seed)
        self.audit_log = audit_log
        self.monitor = monitor
        self.record_ticks = record_ticks
        self.run_id = run_id

    def _build_lifecycles(self) -> dict[StrategyKind, TradeLifecycle]:
        sim = self.config.simulation
        specs = build_strategy_specs(self.config.strategies)
        return {
            kind: TradeLifecycle(spec, hold_period=sim.hold_period, volume=sim.volume)
            for kind, spec in specs.items()
        }

    def _audit(self, event: str, payload: dict) -> None:
        if self.audit_log is not None:
            self.audit_log.log(event, payload)

    def run(self) -> SimulationResult:
        sim = self.config.simulation
        process = PriceProcess(sim, self.shocks)
        lifecycles = self._build_lifecycles()
        ledger = PnLLedger()
        records: list[TickRecord] = []

        self._audit("run_start", {"total_ticks": sim.total_ticks, "seed": getattr(self.shocks, "seed", None)})
        if self.monitor is not None:
            self.monitor.run_started(self.run_id, sim.total_ticks)

        for tick in range(1, sim.total_ticks):
            try:
                spot = process.advance()
            except SimulationError as exc:
                self._audit("simulation_fault", {"tick": tick, "reason": str(exc)})
                if self.monitor is not None:
                    self.monitor.simulation_fault(tick, str(exc))
                raise

            snapshot = compute_snapshot(process.series, tick, self.config.indicators)
            signals = {kind: lifecycle.spec.signal(snapshot) for kind, lifecycle in lifecycles.items()}

            for kind, lifecycle in lifecycles.items():
                was_open = lifecycle.trade is not None
                closed = lifecycle.step(tick, spot, signals[kind])
                if closed is not None:
                    ledger.record(closed)
                    self._audit(
                        "trade_close",
                        {
                            "strategy": kind.value,
                            "tick": tick,
                            "entry_tick": closed.entry_tick,
                            "exit_price": closed.exit_price,
                            "pnl": closed.pnl,
                            "reason": closed.reason.value,
                        },
                    )
                elif not was_open and lifecycle.trade is not None:
                    self._audit(
                        "trade_open",
                        {
                            "strategy": kind.value,
                            "tick": tick,
                            "entry_price": spot,
                            "strikes": list(lifecycle.trade.strikes),
                        },
                    )

            if self.record_ticks:
                records.append(
                    TickRecord(
                        tick=tick,
                        price=spot,
                        snapshot=snapshot,
                        signals=signals,
                        cumulative_pnl=ledger.table,
                        total_pnl=ledger.total,
                    )
                )

        # Positions still open at the horizon stay unrealized.
        open_trades = {
            kind: lifecycle.trade for kind, lifecycle in lifecycles.items() if lifecycle.trade is not None
        }
        result = SimulationResult(
            prices=process.prices,
            pnl=ledger.table,
            trades=list(ledger.trades),
            open_trades=open_trades,
            ticks=records,
            seed=getattr(self.shocks, "seed", None),
        )
        self._audit(
            "run_end",
            {
                "total_pnl": result.total_pnl,
                "pnl": {kind.value: value for kind, value in result.pnl.items()},
                "open_positions": len(open_trades),
            },
        )
        if self.monitor is not None:
            self.monitor.run_finished(self.run_id, result.total_pnl, len(open_trades))
        return result


def run_backtest(config: BacktestConfig, shocks: Optional[ShockSource] = None, **kwargs) -> SimulationResult:
    return BacktestSimulator(config, shocks=shocks, **kwargs).run()
