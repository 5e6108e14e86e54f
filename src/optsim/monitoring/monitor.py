"""Monitoring and alert routing."""

from __future__ import annotations

from dataclasses import dataclass

from optsim.monitoring.notifier import Notifier


@dataclass
class Monitor:
    notifier: Notifier

    def run_started(self, run_id: str, total_ticks: int) -> None:
        self.notifier.notify("RUN_START", f"{run_id} for {total_ticks} ticks")

    def run_finished(self, run_id: str, total_pnl: float, open_positions: int) -> None:
        self.notifier.notify(
            "RUN_END",
            f"{run_id} total PnL {total_pnl:.2f}, {open_positions} position(s) left open",
        )

    def simulation_fault(self, tick: int, reason: str) -> None:
        self.notifier.notify("SIM_FAULT", f"tick {tick}: {reason}")
