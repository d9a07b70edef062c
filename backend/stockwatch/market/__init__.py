"""Stock market subsystem for StockWatch.

Public API:
    Stock               - Tracked symbol and its mutable price
    StockMarket         - Thread-safe registry with observer fan-out
    StockObserver       - Abstract interface for price listeners
    LoggingObserver     - Logs one line per price update
    PriceAlertObserver  - Warns when a price crosses a threshold
    PriceFeed           - Abstract interface for background price producers
    create_price_feed   - Factory that selects simulator or Massive
    create_stocks_router - FastAPI router factory for the REST API
    create_stream_router - FastAPI router factory for the SSE endpoint
"""

from .factory import create_price_feed
from .interface import PriceFeed
from .models import Stock
from .observers import LoggingObserver, PriceAlertObserver, StockObserver
from .registry import StockMarket
from .routes import create_stocks_router
from .stream import create_stream_router

__all__ = [
    "Stock",
    "StockMarket",
    "StockObserver",
    "LoggingObserver",
    "PriceAlertObserver",
    "PriceFeed",
    "create_price_feed",
    "create_stocks_router",
    "create_stream_router",
]
