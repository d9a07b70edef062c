"""GBM-based price feed."""

from __future__ import annotations

import asyncio
import logging
import math

import numpy as np

from .interface import PriceFeed
from .registry import StockMarket
from .seed_prices import DEFAULT_PARAMS, MARKET_CORRELATION, MIN_PRICE, SYMBOL_PARAMS

logger = logging.getLogger(__name__)


class GBMSimulator:
    """Geometric Brownian Motion price stepper with a shared market factor.

    Math:
        S(t+dt) = S(t) * exp((mu - sigma^2/2) * dt + sigma * sqrt(dt) * Z)
        Z_i     = sqrt(rho) * M + sqrt(1 - rho) * E_i

    M is one standard normal draw shared by every symbol and E_i is drawn per
    symbol, which gives every pair of symbols correlation rho.

    The simulator holds no prices of its own: ``step`` takes the current
    prices and returns the next ones, unrounded.
    """

    # 252 trading days * 6.5 hours/day * 3600 seconds/hour
    TRADING_SECONDS_PER_YEAR = 252 * 6.5 * 3600
    DEFAULT_DT = 0.5 / TRADING_SECONDS_PER_YEAR  # one 500ms tick

    def __init__(
        self,
        dt: float = DEFAULT_DT,
        event_probability: float = 0.001,
        correlation: float = MARKET_CORRELATION,
        seed: int | None = None,
    ) -> None:
        self._dt = dt
        self._event_prob = event_probability
        self._rho = correlation
        self._rng = np.random.default_rng(seed)

    def step(self, prices: dict[str, float]) -> dict[str, float]:
        """Advance every given price by one tick. Returns {symbol: new_price}."""
        n = len(prices)
        if n == 0:
            return {}

        symbols = list(prices)
        current = np.array([prices[s] for s in symbols], dtype=float)
        params = [SYMBOL_PARAMS.get(s, DEFAULT_PARAMS) for s in symbols]
        mu = np.array([p["mu"] for p in params])
        sigma = np.array([p["sigma"] for p in params])

        market = self._rng.standard_normal()
        z = math.sqrt(self._rho) * market + math.sqrt(1 - self._rho) * self._rng.standard_normal(n)

        drift = (mu - 0.5 * sigma**2) * self._dt
        diffusion = sigma * math.sqrt(self._dt) * z
        nxt = current * np.exp(drift + diffusion)

        # Rare shock events: 2-5% jump in either direction
        shocked = self._rng.random(n) < self._event_prob
        if shocked.any():
            magnitude = self._rng.uniform(0.02, 0.05, n)
            sign = self._rng.choice([-1.0, 1.0], n)
            nxt = np.where(shocked, nxt * (1 + magnitude * sign), nxt)
            for i in np.flatnonzero(shocked):
                logger.debug(
                    "Random event on %s: %.1f%% %s",
                    symbols[i],
                    magnitude[i] * 100,
                    "up" if sign[i] > 0 else "down",
                )

        return {s: float(p) for s, p in zip(symbols, nxt)}


class SimulatorFeed(PriceFeed):
    """PriceFeed backed by the GBM simulator.

    Every ``update_interval`` seconds, steps all stocks currently in the
    market and writes the results back through ``update_price``.
    """

    def __init__(
        self,
        market: StockMarket,
        update_interval: float = 0.5,
        event_probability: float = 0.001,
        seed: int | None = None,
    ) -> None:
        self._market = market
        self._interval = update_interval
        self._sim = GBMSimulator(event_probability=event_probability, seed=seed)
        self._exact: dict[str, float] = {}  # Unrounded prices from the last tick
        self._task: asyncio.Task | None = None

    async def start(self) -> None:
        self._task = asyncio.create_task(self._run_loop(), name="simulator-loop")
        logger.info("Simulator started with %d stocks, %.2fs interval", len(self._market), self._interval)

    async def stop(self) -> None:
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None
        logger.info("Simulator stopped")

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def tick(self) -> dict[str, float]:
        """Step once and apply to the market. Returns the prices applied.

        Prices are quoted to the cent, but the walk continues from the
        unrounded value as long as nobody else has repriced the stock.
        """
        current: dict[str, float] = {}
        for symbol, stock in self._market.get_all().items():
            exact = self._exact.get(symbol)
            current[symbol] = exact if exact is not None and self._quote(exact) == stock.price else stock.price

        applied: dict[str, float] = {}
        self._exact = {}
        for symbol, exact in self._sim.step(current).items():
            price = self._quote(exact)
            # The stock may have been removed since the snapshot
            if self._market.update_price(symbol, price) is not None:
                self._exact[symbol] = exact
                applied[symbol] = price
        return applied

    @staticmethod
    def _quote(price: float) -> float:
        return max(round(price, 2), MIN_PRICE)

    async def _run_loop(self) -> None:
        """Core loop: tick, sleep."""
        while True:
            try:
                self.tick()
            except Exception:
                logger.exception("Simulator step failed")
            await asyncio.sleep(self._interval)
