"""Human-readable and JSON renderings of a finished run."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional

from optsim.runtime.context import RunContext
from optsim.simulator.models import BatchSummary, SimulationResult


def format_report(result: SimulationResult) -> str:
    lines = ["Cumulative PnL per Strategy:"]
    for kind, value in result.pnl.items():
        lines.append(f"  Strategy {kind.strategy_id} ({kind.label}): {value:.4f}")
    lines.append(f"Total PnL: {result.total_pnl:.4f}")
    return "\n".join(lines)


def format_batch_summary(summary: BatchSummary) -> str:
    lines = [f"Runs: {summary.runs}", "Mean PnL per Strategy:"]
    for kind, value in summary.mean_pnl.items():
        lines.append(f"  Strategy {kind.strategy_id} ({kind.label}): {value:.4f}")
    lines.append(
        f"Total PnL mean {summary.mean_total:.4f}, min {summary.min_total:.4f}, "
        f"max {summary.max_total:.4f}, profitable {summary.profitable_share * 100:.1f}%"
    )
    return "\n".join(lines)


def build_report(result: SimulationResult, context: Optional[RunContext] = None) -> dict[str, Any]:
    return {
        "generated_at_utc": datetime.now(timezone.utc).isoformat(),
        "run_id": context.run_id if context else None,
        "config_hash": context.config_hash if context else None,
        "seed": result.seed,
        "summary": {
            "ticks": len(result.prices),
            "total_pnl": result.total_pnl,
            "closed_trades": len(result.trades),
            "open_positions": len(result.open_trades),
        },
        "pnl": [
            {
                "strategy_id": kind.strategy_id,
                "strategy": kind.value,
                "pnl": value,
                "trades": len(result.trades_for(kind)),
            }
            for kind, value in result.pnl.items()
        ],
        "trades": [
            {
                "strategy": trade.kind.value,
                "entry_tick": trade.entry_tick,
                "exit_tick": trade.exit_tick,
                "entry_price": trade.entry_price,
                "exit_price": trade.exit_price,
                "strikes": list(trade.strikes),
                "volume": trade.volume,
                "pnl": trade.pnl,
                "reason": trade.reason.value,
            }
            for trade in result.trades
        ],
        "open_trades": [
            {
                "strategy": trade.kind.value,
                "entry_tick": trade.entry_tick,
                "entry_price": trade.entry_price,
                "strikes": list(trade.strikes),
            }
            for trade in result.open_trades.values()
        ],
        "prices": result.prices,
    }


def build_batch_report(
    summary: BatchSummary,
    results: list[SimulationResult],
    context: Optional[RunContext] = None,
) -> dict[str, Any]:
    return {
        "generated_at_utc": datetime.now(timezone.utc).isoformat(),
        "run_id": context.run_id if context else None,
        "config_hash": context.config_hash if context else None,
        "summary": {
            "runs": summary.runs,
            "mean_total_pnl": summary.mean_total,
            "min_total_pnl": summary.min_total,
            "max_total_pnl": summary.max_total,
            "profitable_share": summary.profitable_share,
        },
        "mean_pnl": [
            {"strategy_id": kind.strategy_id, "strategy": kind.value, "pnl": value}
            for kind, value in summary.mean_pnl.items()
        ],
        "runs": [
            {
                "seed": result.seed,
                "total_pnl": result.total_pnl,
                "closed_trades": len(result.trades),
                "open_positions": len(result.open_trades),
            }
            for result in results
        ],
    }
