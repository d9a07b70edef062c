"""Factory for creating price feeds."""

from __future__ import annotations

import logging
import math
import os

from .interface import PriceFeed
from .registry import StockMarket

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        value = 0.0
    if not math.isfinite(value) or value <= 0:
        logger.warning("Invalid %s=%r, using default %.2f", name, raw, default)
        return default
    return value


def create_price_feed(market: StockMarket) -> PriceFeed:
    """Create the appropriate price feed based on environment variables.

    - MASSIVE_API_KEY set and non-empty → MassiveFeed (real market data),
      polling every MASSIVE_POLL_INTERVAL seconds (default 15)
    - Otherwise → SimulatorFeed, ticking every SIMULATOR_UPDATE_INTERVAL
      seconds (default 0.5)

    Returns an unstarted feed. Caller must await feed.start().
    """
    api_key = os.environ.get("MASSIVE_API_KEY", "").strip()

    if api_key:
        from .massive_client import MassiveFeed

        logger.info("Price feed: Massive API (real data)")
        return MassiveFeed(
            api_key=api_key,
            market=market,
            poll_interval=_env_float("MASSIVE_POLL_INTERVAL", 15.0),
        )
    else:
        from .simulator import SimulatorFeed

        logger.info("Price feed: GBM Simulator")
        return SimulatorFeed(
            market=market,
            update_interval=_env_float("SIMULATOR_UPDATE_INTERVAL", 0.5),
        )
