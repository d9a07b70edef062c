"""FastAPI application for StockWatch.

Endpoints:
  GET    /api/stocks                 - All tracked stocks
  GET    /api/stocks/{symbol}        - One stock
  PUT    /api/stocks/{symbol}        - Track a stock at a price
  POST   /api/stocks/{symbol}/price  - Update a price and notify observers
  DELETE /api/stocks/{symbol}        - Stop tracking a stock
  GET    /api/stream/prices          - SSE stream of live prices

Serve with an ASGI server in factory mode, e.g. `stockwatch.main:build_app`.
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .market import (
    LoggingObserver,
    PriceFeed,
    Stock,
    StockMarket,
    create_price_feed,
    create_stocks_router,
    create_stream_router,
)
from .market.seed_prices import SEED_PRICES

logger = logging.getLogger(__name__)


def setup_logging(level: str | None = None) -> None:
    """Configure the stockwatch namespace logger without duplicating handlers."""
    level = (level or os.environ.get("STOCKWATCH_LOG_LEVEL", "INFO")).upper()

    app_logger = logging.getLogger("stockwatch")
    if not app_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(asctime)s] %(name)s - %(levelname)s - %(message)s"))
        app_logger.addHandler(handler)
        # Don't propagate to root logger (prevents duplicates under uvicorn)
        app_logger.propagate = False
    app_logger.setLevel(getattr(logging, level, logging.INFO))


def create_app(
    market: StockMarket | None = None,
    feed: PriceFeed | None = None,
    seed: bool = True,
) -> FastAPI:
    """Build the app around a market.

    With no market given, a new one is created and (if ``seed``) filled from
    SEED_PRICES. With no feed given, one is picked by create_price_feed().
    The feed is started and stopped with the app's lifespan.
    """
    if market is None:
        market = StockMarket()
        if seed:
            for symbol, price in SEED_PRICES.items():
                market.add_stock(Stock(symbol=symbol, price=price))
        market.add_observer(LoggingObserver("ticker"))
    if feed is None:
        feed = create_price_feed(market)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting StockWatch with %d stocks", len(market))
        await feed.start()
        try:
            yield
        finally:
            await feed.stop()
            logger.info("StockWatch stopped")

    app = FastAPI(title="StockWatch", version="0.1.0", lifespan=lifespan)
    app.state.market = market
    app.state.feed = feed
    app.include_router(create_stocks_router(market))
    app.include_router(create_stream_router(market))
    return app


def build_app() -> FastAPI:
    """Entry point for ASGI servers: configure logging, then build the app."""
    setup_logging()
    return create_app()
