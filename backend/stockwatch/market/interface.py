"""Abstract interface for price feeds."""

from __future__ import annotations

from abc import ABC, abstractmethod


class PriceFeed(ABC):
    """Contract for background producers of price updates.

    A feed pushes new prices into a StockMarket via ``update_price`` on its
    own schedule. It only ever prices symbols the market already tracks, so
    adding and removing stocks is done on the market, not the feed.

    Lifecycle:
        feed = create_price_feed(market)
        await feed.start()
        # ... app runs, market.add_stock(...) / market.remove_stock(...) ...
        await feed.stop()
    """

    @abstractmethod
    async def start(self) -> None:
        """Begin producing price updates in a background task.

        Must be called exactly once before stop().
        """

    @abstractmethod
    async def stop(self) -> None:
        """Stop the background task.

        Safe to call multiple times. After stop(), the feed will not write
        to the market again.
        """

    @property
    @abstractmethod
    def is_running(self) -> bool:
        """True while the background task is alive."""
