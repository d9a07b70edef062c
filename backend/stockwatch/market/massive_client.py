"""Massive (Polygon.io) price feed for real market data."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from .interface import PriceFeed
from .registry import StockMarket

logger = logging.getLogger(__name__)


class MassiveFeed(PriceFeed):
    """PriceFeed backed by the Massive (Polygon.io) REST API.

    Fetches snapshots for every symbol in the market with a single call to
    GET /v2/snapshot/locale/us/markets/stocks/tickers, then applies each
    last-trade price through ``StockMarket.update_price``.

    Free tier allows 5 req/min, hence the 15s default interval.
    """

    def __init__(
        self,
        api_key: str,
        market: StockMarket,
        poll_interval: float = 15.0,
    ) -> None:
        self._api_key = api_key
        self._market = market
        self._interval = poll_interval
        self._task: asyncio.Task | None = None
        self._client: Any = None

    async def start(self) -> None:
        # Imported here so the simulator runs without the massive package
        from massive import RESTClient

        self._client = RESTClient(api_key=self._api_key)

        # First poll right away so prices are live before the first interval
        await self._poll_once()

        self._task = asyncio.create_task(self._poll_loop(), name="massive-poller")
        logger.info(
            "Massive poller started: %d symbols, %.1fs interval",
            len(self._market),
            self._interval,
        )

    async def stop(self) -> None:
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None
        self._client = None
        logger.info("Massive poller stopped")

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _poll_loop(self) -> None:
        """Poll on interval. First poll already happened in start()."""
        while True:
            await asyncio.sleep(self._interval)
            await self._poll_once()

    async def _poll_once(self) -> None:
        """Fetch snapshots for the tracked symbols and apply them."""
        symbols = self._market.symbols()
        if not symbols or not self._client:
            return

        try:
            # RESTClient is synchronous
            snapshots = await asyncio.to_thread(self._fetch_snapshots, symbols)
        except Exception as e:
            # 401 (bad key), 429 (rate limit), network errors: retry next interval
            logger.error("Massive poll failed: %s", e)
            return

        applied = 0
        for snap in snapshots:
            try:
                price = snap.last_trade.price
                timestamp = snap.last_trade.timestamp / 1000.0  # ms -> s
                symbol = snap.ticker
            except (AttributeError, TypeError) as e:
                logger.warning("Skipping snapshot for %s: %s", getattr(snap, "ticker", "???"), e)
                continue
            if self._market.update_price(symbol, price, timestamp=timestamp) is not None:
                applied += 1
        logger.debug("Massive poll: updated %d/%d symbols", applied, len(symbols))

    def _fetch_snapshots(self, symbols: list[str]) -> list:
        """Synchronous call to the Massive REST API. Runs in a thread."""
        from massive.rest.models import SnapshotMarketType

        return self._client.get_snapshot_all(
            market_type=SnapshotMarketType.STOCKS,
            tickers=symbols,
        )
