"""Observers notified by the StockMarket on every price update."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from .models import Stock

logger = logging.getLogger(__name__)


class StockObserver(ABC):
    """Contract for anything that wants to hear about price changes.

    The market calls ``update`` synchronously, inside its lock, once per
    successful price update. Implementations may read the market from inside
    ``update`` but should return quickly: every other observer waits.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    def update(self, stock: Stock) -> None:
        """Receive the stock whose price just changed."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class LoggingObserver(StockObserver):
    """Writes one INFO line per notification."""

    def update(self, stock: Stock) -> None:
        logger.info("[%s] Stock %s price updated: $%.2f", self.name, stock.symbol, stock.price)


class PriceAlertObserver(StockObserver):
    """Raises a warning when a price reaches a threshold.

    ``above`` fires when price >= above, ``below`` when price <= below.
    Either bound may be omitted. Fired alerts are kept in ``alerts`` as
    (symbol, price, kind) tuples.
    """

    def __init__(self, name: str, above: float | None = None, below: float | None = None) -> None:
        super().__init__(name)
        self.above = above
        self.below = below
        self.alerts: list[tuple[str, float, str]] = []

    def update(self, stock: Stock) -> None:
        if self.above is not None and stock.price >= self.above:
            self._fire(stock, "above", self.above)
        if self.below is not None and stock.price <= self.below:
            self._fire(stock, "below", self.below)

    def _fire(self, stock: Stock, kind: str, threshold: float) -> None:
        self.alerts.append((stock.symbol, stock.price, kind))
        logger.warning(
            "[%s] Alert: %s at $%.2f is %s threshold $%.2f",
            self.name,
            stock.symbol,
            stock.price,
            kind,
            threshold,
        )
