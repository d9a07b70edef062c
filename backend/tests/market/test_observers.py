"""Tests for the concrete observers."""

import logging

import pytest

from stockwatch.market.models import Stock
from stockwatch.market.observers import LoggingObserver, PriceAlertObserver, StockObserver


class TestStockObserver:

    def test_cannot_instantiate_abstract(self):
        with pytest.raises(TypeError):
            StockObserver("nobody")

    def test_repr_includes_name(self):
        assert repr(LoggingObserver("John")) == "LoggingObserver(name='John')"


class TestLoggingObserver:

    def test_logs_update_line(self, caplog):
        observer = LoggingObserver("John")
        with caplog.at_level(logging.INFO, logger="stockwatch.market.observers"):
            observer.update(Stock(symbol="AAPL", price=155.2))
        assert "[John] Stock AAPL price updated: $155.20" in caplog.text

    def test_logs_through_market(self, market, caplog):
        market.add_observer(LoggingObserver("John"))
        market.add_observer(LoggingObserver("Emily"))
        with caplog.at_level(logging.INFO, logger="stockwatch.market.observers"):
            market.update_price("AAPL", 155.20)
        assert "[John] Stock AAPL price updated: $155.20" in caplog.text
        assert "[Emily] Stock AAPL price updated: $155.20" in caplog.text


class TestPriceAlertObserver:

    def test_above_threshold(self):
        observer = PriceAlertObserver("compliance", above=150.0)
        observer.update(Stock(symbol="AAPL", price=155.0))
        assert observer.alerts == [("AAPL", 155.0, "above")]

    def test_below_threshold(self):
        observer = PriceAlertObserver("risk", below=100.0)
        observer.update(Stock(symbol="AAPL", price=99.5))
        assert observer.alerts == [("AAPL", 99.5, "below")]

    def test_threshold_is_inclusive(self):
        observer = PriceAlertObserver("risk", above=150.0, below=100.0)
        observer.update(Stock(symbol="AAPL", price=150.0))
        observer.update(Stock(symbol="AAPL", price=100.0))
        assert [kind for _, _, kind in observer.alerts] == ["above", "below"]

    def test_no_alert_inside_band(self):
        observer = PriceAlertObserver("risk", above=150.0, below=100.0)
        observer.update(Stock(symbol="AAPL", price=125.0))
        assert observer.alerts == []

    def test_no_thresholds_never_fires(self):
        observer = PriceAlertObserver("idle")
        observer.update(Stock(symbol="AAPL", price=1_000_000.0))
        assert observer.alerts == []

    def test_logs_warning(self, caplog):
        observer = PriceAlertObserver("compliance", above=150.0)
        with caplog.at_level(logging.WARNING, logger="stockwatch.market.observers"):
            observer.update(Stock(symbol="AAPL", price=155.0))
        assert "AAPL at $155.00 is above threshold $150.00" in caplog.text
