"""Data models for the stock market registry."""

from __future__ import annotations

import time
from dataclasses import dataclass, field


@dataclass(slots=True)
class Stock:
    """A tradable symbol and its current price.

    Mutable: the owning StockMarket rewrites ``price``, ``previous_price`` and
    ``timestamp`` on every update. Nothing else should touch them.
    """

    symbol: str
    price: float
    previous_price: float | None = None
    timestamp: float = field(default_factory=time.time)  # Unix seconds

    def __post_init__(self) -> None:
        if self.previous_price is None:
            self.previous_price = self.price

    @property
    def change(self) -> float:
        """Absolute price change from the previous price."""
        return round(self.price - self.previous_price, 4)

    @property
    def change_percent(self) -> float:
        if self.previous_price == 0:
            return 0.0
        return round((self.price - self.previous_price) / self.previous_price * 100, 4)

    @property
    def direction(self) -> str:
        """'up', 'down', or 'flat'."""
        if self.price > self.previous_price:
            return "up"
        elif self.price < self.previous_price:
            return "down"
        return "flat"

    def to_dict(self) -> dict:
        """Serialize for JSON / SSE transmission."""
        return {
            "symbol": self.symbol,
            "price": self.price,
            "previous_price": self.previous_price,
            "timestamp": self.timestamp,
            "change": self.change,
            "change_percent": self.change_percent,
            "direction": self.direction,
        }
