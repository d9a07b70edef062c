"""Thread-safe stock registry with synchronous observer fan-out."""

from __future__ import annotations

import logging
import time
from threading import RLock

from .models import Stock
from .observers import StockObserver

logger = logging.getLogger(__name__)


class StockMarket:
    """Owns the tracked stocks and the observers interested in them.

    Writers: price feeds and the HTTP API.
    Readers: SSE stream, HTTP API, observers (re-entrantly, from ``update``).

    A price update and the notification of every observer happen under one
    lock, so when ``update_price`` returns all observers have seen the new
    price. Observers are notified in registration order.
    """

    def __init__(self) -> None:
        self._stocks: dict[str, Stock] = {}
        self._observers: list[StockObserver] = []
        self._lock = RLock()
        self._version: int = 0  # Bumped on every stock mutation

    # --- Stocks ---

    def add_stock(self, stock: Stock) -> None:
        """Track a stock, replacing any existing entry with the same symbol."""
        with self._lock:
            self._stocks[stock.symbol] = stock
            self._version += 1
        logger.debug("Added stock %s at %.2f", stock.symbol, stock.price)

    def remove_stock(self, symbol: str) -> None:
        """Stop tracking a symbol. No-op if it is not tracked."""
        with self._lock:
            if self._stocks.pop(symbol, None) is not None:
                self._version += 1
                logger.debug("Removed stock %s", symbol)

    def update_price(self, symbol: str, price: float, timestamp: float | None = None) -> Stock | None:
        """Set a new price and notify every observer before returning.

        Unknown symbols are ignored: nothing is created, nobody is notified,
        and None is returned. Otherwise returns the updated Stock.
        """
        with self._lock:
            stock = self._stocks.get(symbol)
            if stock is None:
                logger.debug("Ignoring price update for unknown symbol %s", symbol)
                return None

            stock.previous_price = stock.price
            stock.price = price
            stock.timestamp = timestamp if timestamp is not None else time.time()
            self._version += 1

            for observer in list(self._observers):
                try:
                    observer.update(stock)
                except Exception:
                    logger.exception("Observer %r failed on %s update", observer, symbol)
            return stock

    def get(self, symbol: str) -> Stock | None:
        with self._lock:
            return self._stocks.get(symbol)

    def get_price(self, symbol: str) -> float | None:
        """Convenience: get just the price float, or None."""
        stock = self.get(symbol)
        return stock.price if stock else None

    def get_all(self) -> dict[str, Stock]:
        """Snapshot of all tracked stocks. Returns a shallow copy."""
        with self._lock:
            return dict(self._stocks)

    def snapshot(self) -> dict[str, dict]:
        """Serialized copy of every stock, taken under the lock."""
        with self._lock:
            return {symbol: stock.to_dict() for symbol, stock in self._stocks.items()}

    def symbols(self) -> list[str]:
        with self._lock:
            return list(self._stocks)

    # --- Observers ---

    def add_observer(self, observer: StockObserver) -> None:
        """Register an observer. No-op if already registered."""
        with self._lock:
            if observer not in self._observers:
                self._observers.append(observer)
                logger.debug("Registered observer %r", observer)

    def remove_observer(self, observer: StockObserver) -> None:
        """Unregister an observer. No-op if not registered."""
        with self._lock:
            if observer in self._observers:
                self._observers.remove(observer)
                logger.debug("Unregistered observer %r", observer)

    def observers(self) -> list[StockObserver]:
        with self._lock:
            return list(self._observers)

    @property
    def version(self) -> int:
        """Current version counter. Useful for SSE change detection."""
        return self._version

    def __len__(self) -> int:
        with self._lock:
            return len(self._stocks)

    def __contains__(self, symbol: str) -> bool:
        with self._lock:
            return symbol in self._stocks
