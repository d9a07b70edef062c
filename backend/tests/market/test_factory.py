"""Tests for the price feed factory."""

import os
from unittest.mock import patch

from stockwatch.market.factory import create_price_feed
from stockwatch.market.massive_client import MassiveFeed
from stockwatch.market.registry import StockMarket
from stockwatch.market.simulator import SimulatorFeed


class TestFactory:
    """Tests for create_price_feed."""

    def test_creates_simulator_when_no_api_key(self):
        with patch.dict(os.environ, {}, clear=True):
            feed = create_price_feed(StockMarket())
        assert isinstance(feed, SimulatorFeed)

    def test_creates_simulator_when_api_key_blank(self):
        for value in ["", "   "]:
            with patch.dict(os.environ, {"MASSIVE_API_KEY": value}, clear=True):
                feed = create_price_feed(StockMarket())
            assert isinstance(feed, SimulatorFeed)

    def test_creates_massive_when_api_key_set(self):
        with patch.dict(os.environ, {"MASSIVE_API_KEY": "test-key-123"}, clear=True):
            feed = create_price_feed(StockMarket())
        assert isinstance(feed, MassiveFeed)
        assert feed._api_key == "test-key-123"
        assert feed._interval == 15.0

    def test_feeds_receive_market(self):
        market = StockMarket()
        with patch.dict(os.environ, {}, clear=True):
            assert create_price_feed(market)._market is market
        with patch.dict(os.environ, {"MASSIVE_API_KEY": "test-key"}, clear=True):
            assert create_price_feed(market)._market is market

    def test_simulator_interval_from_env(self):
        with patch.dict(os.environ, {"SIMULATOR_UPDATE_INTERVAL": "0.25"}, clear=True):
            feed = create_price_feed(StockMarket())
        assert feed._interval == 0.25

    def test_massive_interval_from_env(self):
        env = {"MASSIVE_API_KEY": "test-key", "MASSIVE_POLL_INTERVAL": "5"}
        with patch.dict(os.environ, env, clear=True):
            feed = create_price_feed(StockMarket())
        assert feed._interval == 5.0

    def test_invalid_interval_falls_back(self, caplog):
        for value in ["fast", "0", "-1", "nan", "inf"]:
            with patch.dict(os.environ, {"SIMULATOR_UPDATE_INTERVAL": value}, clear=True):
                feed = create_price_feed(StockMarket())
            assert feed._interval == 0.5
        assert "Invalid SIMULATOR_UPDATE_INTERVAL" in caplog.text
