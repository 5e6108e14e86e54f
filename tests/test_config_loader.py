from pathlib import Path

import pytest

yaml = pytest.importorskip("yaml")

from optsim.config import (
    BacktestConfig,
    ConfigError,
    freeze_config,
    load_config,
    serialize_config,
    verify_config_lock,
)


CONFIG_DIR = Path(__file__).resolve().parents[1] / "configs"


def test_load_config_sample():
    config = load_config(CONFIG_DIR / "default.yaml")
    assert config.name == "optsim_default"
    assert config.seed is None
    assert config.simulation.total_ticks == 10000
    assert config.simulation.hold_period == 10
    assert config.indicators.long_window == 20
    assert config.strategies.strangle_high == pytest.approx(0.012)


def test_sample_matches_reference_defaults():
    config = load_config(CONFIG_DIR / "default.yaml")
    defaults = BacktestConfig()
    assert config.simulation == defaults.simulation
    assert config.indicators == defaults.indicators
    assert config.strategies == defaults.strategies


def test_missing_sections_fall_back_to_defaults(tmp_path):
    path = tmp_path / "minimal.yaml"
    path.write_text("name: minimal\nversion: 2\nseed: 5\nsimulation:\n  total_ticks: 300\n", encoding="utf-8")
    config = load_config(path)
    assert config.version == "2"
    assert config.run_id_prefix == "minimal"
    assert config.seed == 5
    assert config.simulation.total_ticks == 300
    assert config.simulation.initial_price == 100.0
    assert config.indicators.vol_window == 5


def test_missing_required_key(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("version: 1\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="name"):
        load_config(path)


def test_non_mapping_rejected(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


@pytest.mark.parametrize(
    "section, body",
    [
        ("simulation", "total_ticks: 1"),
        ("simulation", "initial_price: -5"),
        ("simulation", "dt: 0"),
        ("simulation", "volatility: -0.1"),
        ("simulation", "hold_period: -1"),
        ("simulation", "total_ticks: many"),
        ("simulation", "hold_period: 2.9"),
        ("simulation", "total_ticks: 100.7"),
        ("simulation", "volume: true"),
        ("indicators", "short_window: 4.5"),
        ("indicators", "vol_window: 0"),
        ("strategies", "strike_offset: -0.05"),
        ("strategies", "straddle_high: .nan"),
    ],
)
def test_invalid_values_rejected(tmp_path, section, body):
    path = tmp_path / "bad.yaml"
    path.write_text(f"name: bad\nversion: 1\n{section}:\n  {body}\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_integral_float_accepted_for_integer_setting(tmp_path):
    path = tmp_path / "whole.yaml"
    path.write_text("name: whole\nversion: 1\nsimulation:\n  hold_period: 12.0\n", encoding="utf-8")
    config = load_config(path)
    assert config.simulation.hold_period == 12
    assert isinstance(config.simulation.hold_period, int)


@pytest.mark.parametrize("seed", ["abc", "1.5", "true"])
def test_invalid_seed_rejected(tmp_path, seed):
    path = tmp_path / "seed.yaml"
    path.write_text(f"name: seeded\nversion: 1\nseed: {seed}\n", encoding="utf-8")
    with pytest.raises(ConfigError, match="seed"):
        load_config(path)


def test_freeze_and_verify(tmp_path):
    source = CONFIG_DIR / "default.yaml"
    target = tmp_path / "default.yaml"
    target.write_text(source.read_text(encoding="utf-8"), encoding="utf-8")

    lock_path = freeze_config(target)
    assert verify_config_lock(target, lock_path)

    target.write_text(target.read_text(encoding="utf-8") + "\n# edited\n", encoding="utf-8")
    assert not verify_config_lock(target, lock_path)


def test_serialize_config_round_trips_values():
    payload = serialize_config(BacktestConfig(seed=9))
    assert payload["seed"] == 9
    assert payload["simulation"]["volume"] == 10
    assert payload["strategies"]["strike_offset"] == 0.05
