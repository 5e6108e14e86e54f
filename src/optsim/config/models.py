"""Configuration models for reproducible runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


class ConfigError(ValueError):
    """Raised when a configuration is rejected before a run starts."""


@dataclass(frozen=True)
class SimulationParams:
    total_ticks: int = 10000
    initial_price: float = 100.0
    drift: float = 0.0001
    volatility: float = 0.01
    dt: float = 1.0
    hold_period: int = 10
    volume: int = 10


@dataclass(frozen=True)
class IndicatorParams:
    short_window: int = 5
    long_window: int = 20
    vol_window: int = 5


@dataclass(frozen=True)
class StrategyParams:
    strike_offset: float = 0.05
    straddle_high: float = 0.01
    straddle_low: float = 0.005
    strangle_high: float = 0.012
    strangle_low: float = 0.007


@dataclass(frozen=True)
class MonitoringConfig:
    audit_log_path: str = "runtime/audit.log"
    audit_enabled: bool = False


@dataclass(frozen=True)
class BacktestConfig:
    name: str = "optsim"
    version: str = "1"
    run_id_prefix: str = "optsim"
    seed: Optional[int] = None
    simulation: SimulationParams = field(default_factory=SimulationParams)
    indicators: IndicatorParams = field(default_factory=IndicatorParams)
    strategies: StrategyParams = field(default_factory=StrategyParams)
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)
