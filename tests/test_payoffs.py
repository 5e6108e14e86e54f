import pytest

from optsim.strategy import (
    StrategyKind,
    bear_spread_payoff,
    bull_spread_payoff,
    butterfly_spread_payoff,
    payoff_for,
    straddle_payoff,
    strangle_payoff,
)


def test_straddle_pays_either_side():
    assert straddle_payoff(110, 100) == 10
    assert straddle_payoff(90, 100) == 10
    assert straddle_payoff(100, 100) == 0


def test_strangle_zero_between_strikes():
    assert strangle_payoff(100, 95, 105) == 0
    assert strangle_payoff(90, 95, 105) == 5
    assert strangle_payoff(112, 95, 105) == 7


def test_bull_spread_capped_between_strikes():
    assert bull_spread_payoff(108, 100, 110) == 8
    assert bull_spread_payoff(120, 100, 110) == 10
    assert bull_spread_payoff(95, 100, 110) == 0


def test_bear_spread_short_leg_uses_lower_strike():
    # long put 100 is worth 8, short leg max(92 - 90, 0) costs 2
    assert bear_spread_payoff(92, 100, 90) == 6
    assert bear_spread_payoff(85, 100, 90) == 15
    assert bear_spread_payoff(105, 100, 90) == -15


def test_butterfly_peaks_at_middle_strike():
    assert butterfly_spread_payoff(100, 95, 100, 105) == 5
    assert butterfly_spread_payoff(95, 95, 100, 105) == 0
    assert butterfly_spread_payoff(110, 95, 100, 105) == 0
    assert butterfly_spread_payoff(102, 95, 100, 105) == pytest.approx(3)


def test_payoff_for_dispatches_by_kind():
    assert payoff_for(StrategyKind.STRADDLE, 110, (100,)) == 10
    assert payoff_for(StrategyKind.BUTTERFLY_SPREAD, 100, (95, 100, 105)) == 5


def test_payoff_for_rejects_wrong_strike_count():
    with pytest.raises(ValueError):
        payoff_for(StrategyKind.STRANGLE, 100, (95,))
