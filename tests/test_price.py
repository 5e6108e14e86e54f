import math

import pytest

from optsim.config import SimulationParams
from optsim.simulator import (
    GaussianShocks,
    PriceProcess,
    SequenceShocks,
    SimulationError,
    ZeroShocks,
    gbm_step,
)


def test_gbm_step_formula():
    expected = 100.0 * math.exp((0.01 - 0.5 * 0.2 * 0.2) * 0.5 + 0.2 * math.sqrt(0.5) * 1.3)
    assert gbm_step(100.0, 1.3, 0.01, 0.2, 0.5) == pytest.approx(expected)


def test_gbm_step_flat_without_drift_or_volatility():
    assert gbm_step(100.0, 2.5, 0.0, 0.0, 1.0) == 100.0


def test_gbm_step_overflow_is_fatal():
    with pytest.raises(SimulationError):
        gbm_step(100.0, 1e6, 0.0, 0.01, 1.0)


def test_gbm_step_underflow_to_zero_is_fatal():
    with pytest.raises(SimulationError):
        gbm_step(100.0, -1e6, 0.0, 0.01, 1.0)


def test_price_process_appends_one_price_per_advance():
    process = PriceProcess(SimulationParams(initial_price=50.0), SequenceShocks([0.5, -0.5]))
    assert process.prices == [50.0]
    first = process.advance()
    second = process.advance()
    assert process.prices == [50.0, first, second]
    assert process.tick == 2
    assert process.last == second


def test_prices_is_a_copy():
    process = PriceProcess(SimulationParams(), ZeroShocks())
    process.advance()
    snapshot = process.prices
    snapshot.append(-1.0)
    assert len(process.prices) == 2


def test_gaussian_shocks_reproducible_with_seed():
    first = GaussianShocks(11)
    second = GaussianShocks(11)
    assert [first.draw() for _ in range(20)] == [second.draw() for _ in range(20)]


def test_sequence_shocks_wrap_around():
    shocks = SequenceShocks([1.0, 2.0])
    assert [shocks.draw() for _ in range(5)] == [1.0, 2.0, 1.0, 2.0, 1.0]


def test_sequence_shocks_need_values():
    with pytest.raises(ValueError):
        SequenceShocks([])
