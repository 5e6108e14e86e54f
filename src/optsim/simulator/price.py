"""Geometric Brownian motion price path and its shock sources."""

from __future__ import annotations

import itertools
import math
import random
from typing import Iterable, Optional, Protocol

from optsim.config.models import SimulationParams
from optsim.simulator.models import SimulationError


class ShockSource(Protocol):
    def draw(self) -> float:
        ...


class GaussianShocks:
    """Independent standard-normal draws from an owned generator."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def draw(self) -> float:
        return self._rng.gauss(0.0, 1.0)


class SequenceShocks:
    """Replays a fixed sequence of shocks, wrapping around at the end."""

    def __init__(self, values: Iterable[float]) -> None:
        values = [float(value) for value in values]
        if not values:
            raise ValueError("SequenceShocks needs at least one value")
        self._cycle = itertools.cycle(values)

    def draw(self) -> float:
        return next(self._cycle)


class ZeroShocks(SequenceShocks):
    def __init__(self) -> None:
        super().__init__([0.0])


def gbm_step(previous: float, shock: float, drift: float, volatility: float, dt: float) -> float:
    exponent = (drift - 0.5 * volatility * volatility) * dt + volatility * math.sqrt(dt) * shock
    try:
        price = previous * math.exp(exponent)
    except OverflowError as exc:
        raise SimulationError(f"price overflow from {previous} with shock {shock}") from exc
    if not math.isfinite(price) or price <= 0:
        raise SimulationError(f"degenerate price {price} from {previous} with shock {shock}")
    return price


class PriceProcess:
    def __init__(self, params: SimulationParams, shocks: ShockSource) -> None:
        self.params = params
        self.shocks = shocks
        self._series: list[float] = [float(params.initial_price)]

    @property
    def tick(self) -> int:
        return len(self._series) - 1

    @property
    def last(self) -> float:
        return self._series[-1]

    @property
    def series(self) -> list[float]:
        return self._series

    @property
    def prices(self) -> list[float]:
        return list(self._series)

    def advance(self) -> float:
        shock = self.shocks.draw()
        price = gbm_step(
            self._series[-1],
            shock,
            self.params.drift,
            self.params.volatility,
            self.params.dt,
        )
        self._series.append(price)
        return price
