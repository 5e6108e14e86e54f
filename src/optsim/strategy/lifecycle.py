"""Single-position trade lifecycle shared by every strategy."""

from __future__ import annotations

from typing import Optional

from optsim.strategy.models import ClosedTrade, ExitReason, StrategyKind, Trade, TradeState
from optsim.strategy.signals import AlphaSignal
from optsim.strategy.specs import StrategySpec


class TradeLifecycle:
    """Flat -> Open -> Flat state machine for one strategy.

    A flat lifecycle opens on ``ENTER``. An open one closes once the holding
    period has elapsed or on ``EXIT``; further ``ENTER`` signals while open are
    ignored. Opening and closing never happen on the same tick.
    """

    def __init__(self, spec: StrategySpec, hold_period: int, volume: int = 10) -> None:
        self.spec = spec
        self.hold_period = hold_period
        self.volume = volume
        self.trade: Optional[Trade] = None

    @property
    def kind(self) -> StrategyKind:
        return self.spec.kind

    @property
    def state(self) -> TradeState:
        return TradeState.OPEN if self.trade is not None else TradeState.FLAT

    def step(self, tick: int, spot: float, signal: AlphaSignal) -> Optional[ClosedTrade]:
        if self.trade is None:
            if signal == AlphaSignal.ENTER:
                self._open(tick, spot)
            return None

        expired = tick - self.trade.entry_tick >= self.hold_period
        if expired or signal == AlphaSignal.EXIT:
            reason = ExitReason.HOLD_EXPIRED if expired else ExitReason.EXIT_SIGNAL
            return self._close(tick, spot, reason)
        return None

    def _open(self, tick: int, spot: float) -> None:
        assert self.trade is None, f"{self.kind.value} already has an open trade"
        self.trade = Trade(
            kind=self.kind,
            entry_tick=tick,
            entry_price=spot,
            strikes=self.spec.strikes(spot),
            volume=self.volume,
        )

    def _close(self, tick: int, spot: float, reason: ExitReason) -> ClosedTrade:
        trade = self.trade
        assert trade is not None, f"{self.kind.value} has no open trade to close"
        assert trade.entry_tick < tick, "a trade cannot close on its entry tick"
        payoff = self.spec.payoff(spot, trade.strikes)
        self.trade = None
        return ClosedTrade(
            kind=trade.kind,
            entry_tick=trade.entry_tick,
            exit_tick=tick,
            entry_price=trade.entry_price,
            exit_price=spot,
            strikes=trade.strikes,
            volume=trade.volume,
            payoff=payoff,
            pnl=payoff * trade.volume,
            reason=reason,
        )
