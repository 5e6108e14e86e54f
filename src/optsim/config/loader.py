"""Load, validate and freeze configuration files."""

from __future__ import annotations

import hashlib
import json
import math
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import yaml

from optsim.config.models import (
    BacktestConfig,
    ConfigError,
    IndicatorParams,
    MonitoringConfig,
    SimulationParams,
    StrategyParams,
)


def load_config(path: str | Path) -> BacktestConfig:
    path = Path(path)
    data = _load_yaml(path)

    name = str(_require(data, "name"))
    version = str(_require(data, "version"))
    run_id_prefix = str(data.get("run_id_prefix", name))
    seed = _coerce(_to_optional_int, data, "seed", None)

    config = BacktestConfig(
        name=name,
        version=version,
        run_id_prefix=run_id_prefix,
        seed=seed,
        simulation=_parse_simulation(data.get("simulation") or {}),
        indicators=_parse_indicators(data.get("indicators") or {}),
        strategies=_parse_strategies(data.get("strategies") or {}),
        monitoring=_parse_monitoring(data.get("monitoring") or {}),
    )
    validate_config(config)
    return config


def validate_config(config: BacktestConfig) -> BacktestConfig:
    sim = config.simulation
    ind = config.indicators
    strat = config.strategies

    _check_int(sim.total_ticks, "simulation.total_ticks", minimum=2)
    _check_int(sim.hold_period, "simulation.hold_period", minimum=0)
    _check_int(sim.volume, "simulation.volume", minimum=1)
    _check_int(ind.short_window, "indicators.short_window", minimum=1)
    _check_int(ind.long_window, "indicators.long_window", minimum=1)
    _check_int(ind.vol_window, "indicators.vol_window", minimum=1)

    _check_float(sim.initial_price, "simulation.initial_price", strictly_positive=True)
    _check_float(sim.dt, "simulation.dt", strictly_positive=True)
    _check_float(sim.volatility, "simulation.volatility", non_negative=True)
    _check_float(sim.drift, "simulation.drift")
    _check_float(strat.strike_offset, "strategies.strike_offset", non_negative=True)
    for key in ("straddle_high", "straddle_low", "strangle_high", "strangle_low"):
        _check_float(getattr(strat, key), f"strategies.{key}")
    return config


def compute_config_hash(path: str | Path) -> str:
    path = Path(path)
    content = path.read_bytes()
    return hashlib.sha256(content).hexdigest()


def freeze_config(path: str | Path, lock_path: Optional[str | Path] = None) -> Path:
    path = Path(path)
    config_hash = compute_config_hash(path)
    if lock_path is None:
        lock_path = path.with_suffix(path.suffix + ".lock.json")
    lock_path = Path(lock_path)

    payload = {
        "config_path": str(path),
        "config_hash": config_hash,
        "frozen_at_utc": datetime.now(timezone.utc).isoformat(),
    }
    lock_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
    return lock_path


def verify_config_lock(path: str | Path, lock_path: Optional[str | Path] = None) -> bool:
    path = Path(path)
    if lock_path is None:
        lock_path = path.with_suffix(path.suffix + ".lock.json")
    lock_path = Path(lock_path)
    if not lock_path.exists():
        return False
    payload = json.loads(lock_path.read_text(encoding="utf-8"))
    expected = payload.get("config_hash")
    return expected == compute_config_hash(path)


def serialize_config(config: BacktestConfig) -> dict[str, Any]:
    return asdict(config)


def _load_yaml(path: Path) -> dict[str, Any]:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping")
    return data


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ConfigError(f"Missing required config key: {key}")
    return data[key]


def _to_int(value: Any) -> int:
    # int() would truncate 2.9 to 2 and accept True as 1.
    if isinstance(value, bool):
        raise TypeError("boolean is not an integer")
    if isinstance(value, float) and not value.is_integer():
        raise ValueError("fractional value is not an integer")
    return int(value)


def _to_optional_int(value: Any) -> Optional[int]:
    return None if value is None else _to_int(value)


def _coerce(cast, data: dict[str, Any], key: str, default: Any) -> Any:
    value = data.get(key, default)
    try:
        return cast(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ConfigError(f"Invalid {key}: {value!r}") from exc


def _parse_simulation(data: dict[str, Any]) -> SimulationParams:
    defaults = SimulationParams()
    return SimulationParams(
        total_ticks=_coerce(_to_int, data, "total_ticks", defaults.total_ticks),
        initial_price=_coerce(float, data, "initial_price", defaults.initial_price),
        drift=_coerce(float, data, "drift", defaults.drift),
        volatility=_coerce(float, data, "volatility", defaults.volatility),
        dt=_coerce(float, data, "dt", defaults.dt),
        hold_period=_coerce(_to_int, data, "hold_period", defaults.hold_period),
        volume=_coerce(_to_int, data, "volume", defaults.volume),
    )


def _parse_indicators(data: dict[str, Any]) -> IndicatorParams:
    defaults = IndicatorParams()
    return IndicatorParams(
        short_window=_coerce(_to_int, data, "short_window", defaults.short_window),
        long_window=_coerce(_to_int, data, "long_window", defaults.long_window),
        vol_window=_coerce(_to_int, data, "vol_window", defaults.vol_window),
    )


def _parse_strategies(data: dict[str, Any]) -> StrategyParams:
    defaults = StrategyParams()
    return StrategyParams(
        strike_offset=_coerce(float, data, "strike_offset", defaults.strike_offset),
        straddle_high=_coerce(float, data, "straddle_high", defaults.straddle_high),
        straddle_low=_coerce(float, data, "straddle_low", defaults.straddle_low),
        strangle_high=_coerce(float, data, "strangle_high", defaults.strangle_high),
        strangle_low=_coerce(float, data, "strangle_low", defaults.strangle_low),
    )


def _parse_monitoring(data: dict[str, Any]) -> MonitoringConfig:
    return MonitoringConfig(
        audit_log_path=str(data.get("audit_log_path", "runtime/audit.log")),
        audit_enabled=bool(data.get("audit_enabled", False)),
    )


def _check_int(value: Any, key: str, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    if value < minimum:
        raise ConfigError(f"{key} must be >= {minimum}, got {value}")


def _check_float(
    value: Any,
    key: str,
    strictly_positive: bool = False,
    non_negative: bool = False,
) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{key} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise ConfigError(f"{key} must be finite, got {value}")
    if strictly_positive and value <= 0:
        raise ConfigError(f"{key} must be > 0, got {value}")
    if non_negative and value < 0:
        raise ConfigError(f"{key} must be >= 0, got {value}")
