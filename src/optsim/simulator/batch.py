"""Repeated seeded runs and their summary."""

from __future__ import annotations

from typing import Iterable, Optional

from optsim.config.models import BacktestConfig
from optsim.monitoring.audit import AuditLog
from optsim.simulator.engine import BacktestSimulator
from optsim.simulator.models import BatchSummary, SimulationResult
from optsim.simulator.price import GaussianShocks
from optsim.strategy.models import StrategyKind


def run_batch(
    config: BacktestConfig,
    seeds: Iterable[int],
    audit_log: Optional[AuditLog] = None,
) -> list[SimulationResult]:
    """Run one simulation per seed.

    When an audit log is given, every run appends to the same file under its
    own run id (``<run_id_prefix>-<seed>``).
    """
    results: list[SimulationResult] = []
    for seed in seeds:
        run_id = f"{config.run_id_prefix}-{seed}"
        run_audit = None
        if audit_log is not None:
            run_audit = AuditLog(audit_log.path, run_id=run_id, config_hash=audit_log.config_hash)
        simulator = BacktestSimulator(config, shocks=GaussianShocks(seed), audit_log=run_audit, run_id=run_id)
        results.append(simulator.run())
    return results


def summarize_batch(results: Iterable[SimulationResult]) -> BatchSummary:
    results_list = list(results)
    total = len(results_list)
    if total == 0:
        return BatchSummary(0, {kind: 0.0 for kind in StrategyKind}, 0.0, 0.0, 0.0, 0.0)

    totals = [result.total_pnl for result in results_list]
    mean_pnl = {
        kind: sum(result.pnl[kind] for result in results_list) / total
        for kind in StrategyKind
    }
    profitable = sum(1 for value in totals if value > 0)

    return BatchSummary(
        runs=total,
        mean_pnl=mean_pnl,
        mean_total=sum(totals) / total,
        min_total=min(totals),
        max_total=max(totals),
        profitable_share=profitable / total,
    )
