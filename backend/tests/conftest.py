"""Pytest configuration and fixtures."""

import pytest

from stockwatch.market.interface import PriceFeed
from stockwatch.market.models import Stock
from stockwatch.market.observers import StockObserver
from stockwatch.market.registry import StockMarket


class RecordingObserver(StockObserver):
    """Remembers (symbol, price) for every notification it receives."""

    def __init__(self, name: str, log: list | None = None) -> None:
        super().__init__(name)
        self.calls: list[tuple[str, float]] = []
        self._log = log

    def update(self, stock: Stock) -> None:
        self.calls.append((stock.symbol, stock.price))
        if self._log is not None:
            self._log.append(self.name)


class StubFeed(PriceFeed):
    """Feed that does nothing but record its lifecycle."""

    def __init__(self) -> None:
        self.started = False
        self.stopped = False

    async def start(self) -> None:
        self.started = True

    async def stop(self) -> None:
        self.stopped = True

    @property
    def is_running(self) -> bool:
        return self.started and not self.stopped


@pytest.fixture
def market():
    """A market tracking AAPL at 150.50."""
    m = StockMarket()
    m.add_stock(Stock(symbol="AAPL", price=150.50))
    return m


@pytest.fixture
def stub_feed():
    return StubFeed()


@pytest.fixture
def make_observer():
    """Factory for RecordingObservers."""
    return RecordingObserver
