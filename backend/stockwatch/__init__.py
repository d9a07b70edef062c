"""StockWatch: stock price registry with live observer notifications."""

__version__ = "0.1.0"
