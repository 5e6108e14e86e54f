from optsim.config import StrategyParams
from optsim.strategy import AlphaSignal, IndicatorSnapshot, StrategyKind, generate_signals


PARAMS = StrategyParams()


def _signals(short_ma=100.0, long_ma=100.0, vol=0.0):
    return generate_signals(IndicatorSnapshot(short_ma=short_ma, long_ma=long_ma, volatility=vol), PARAMS)


def test_straddle_and_strangle_volatility_bands():
    high = _signals(vol=0.02)
    assert high[StrategyKind.STRADDLE] == AlphaSignal.ENTER
    assert high[StrategyKind.STRANGLE] == AlphaSignal.ENTER

    mid = _signals(vol=0.011)
    assert mid[StrategyKind.STRADDLE] == AlphaSignal.ENTER
    assert mid[StrategyKind.STRANGLE] == AlphaSignal.NEUTRAL

    low = _signals(vol=0.006)
    assert low[StrategyKind.STRADDLE] == AlphaSignal.NEUTRAL
    assert low[StrategyKind.STRANGLE] == AlphaSignal.EXIT

    quiet = _signals(vol=0.001)
    assert quiet[StrategyKind.STRADDLE] == AlphaSignal.EXIT
    assert quiet[StrategyKind.STRANGLE] == AlphaSignal.EXIT


def test_thresholds_are_strict():
    at_high = _signals(vol=PARAMS.straddle_high)
    assert at_high[StrategyKind.STRADDLE] == AlphaSignal.NEUTRAL
    at_low = _signals(vol=PARAMS.straddle_low)
    assert at_low[StrategyKind.STRADDLE] == AlphaSignal.NEUTRAL
    assert at_low[StrategyKind.BUTTERFLY_SPREAD] == AlphaSignal.EXIT


def test_spreads_follow_moving_average_cross():
    up = _signals(short_ma=101.0, long_ma=100.0)
    assert up[StrategyKind.BULL_SPREAD] == AlphaSignal.ENTER
    assert up[StrategyKind.BEAR_SPREAD] == AlphaSignal.EXIT

    down = _signals(short_ma=99.0, long_ma=100.0)
    assert down[StrategyKind.BULL_SPREAD] == AlphaSignal.EXIT
    assert down[StrategyKind.BEAR_SPREAD] == AlphaSignal.ENTER


def test_equal_moving_averages_exit_both_spreads():
    signals = _signals(short_ma=100.0, long_ma=100.0)
    assert signals[StrategyKind.BULL_SPREAD] == AlphaSignal.EXIT
    assert signals[StrategyKind.BEAR_SPREAD] == AlphaSignal.EXIT


def test_butterfly_enters_in_low_volatility_only():
    assert _signals(vol=0.0)[StrategyKind.BUTTERFLY_SPREAD] == AlphaSignal.ENTER
    assert _signals(vol=0.02)[StrategyKind.BUTTERFLY_SPREAD] == AlphaSignal.EXIT


def test_directional_and_butterfly_rules_never_neutral():
    for vol in (0.0, 0.004, 0.006, 0.011, 0.5):
        for short_ma in (99.0, 100.0, 101.0):
            signals = _signals(short_ma=short_ma, vol=vol)
            for kind in (StrategyKind.BULL_SPREAD, StrategyKind.BEAR_SPREAD, StrategyKind.BUTTERFLY_SPREAD):
                assert signals[kind] != AlphaSignal.NEUTRAL
