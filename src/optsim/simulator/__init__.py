"""Simulation helpers."""

from optsim.simulator.batch import run_batch, summarize_batch
from optsim.simulator.engine import BacktestSimulator, PnLLedger, run_backtest
from optsim.simulator.models import BatchSummary, SimulationError, SimulationResult, TickRecord
from optsim.simulator.price import (
    GaussianShocks,
    PriceProcess,
    SequenceShocks,
    ShockSource,
    ZeroShocks,
    gbm_step,
)
from optsim.simulator.report import build_batch_report, build_report, format_batch_summary, format_report

__all__ = [
    "BacktestSimulator",
    "BatchSummary",
    "GaussianShocks",
    "PnLLedger",
    "PriceProcess",
    "SequenceShocks",
    "ShockSource",
    "SimulationError",
    "SimulationResult",
    "TickRecord",
    "ZeroShocks",
    "build_batch_report",
    "build_report",
    "format_batch_summary",
    "format_report",
    "gbm_step",
    "run_backtest",
    "run_batch",
    "summarize_batch",
]
