"""Config loading and freezing."""

from optsim.config.loader import (
    compute_config_hash,
    freeze_config,
    load_config,
    serialize_config,
    validate_config,
    verify_config_lock,
)
from optsim.config.models import (
    BacktestConfig,
    ConfigError,
    IndicatorParams,
    MonitoringConfig,
    SimulationParams,
    StrategyParams,
)

__all__ = [
    "BacktestConfig",
    "ConfigError",
    "IndicatorParams",
    "MonitoringConfig",
    "SimulationParams",
    "StrategyParams",
    "compute_config_hash",
    "freeze_config",
    "load_config",
    "serialize_config",
    "validate_config",
    "verify_config_lock",
]
