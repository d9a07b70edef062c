"""Seed prices and per-symbol parameters for the default watchlist."""

# Starting prices used when the app seeds an empty market
SEED_PRICES: dict[str, float] = {
    "AAPL": 150.50,
    "GOOGL": 2530.40,
    "MSFT": 420.00,
    "AMZN": 185.00,
    "TSLA": 250.00,
    "NVDA": 800.00,
    "JPM": 195.00,
    "V": 280.00,
}

# Per-symbol GBM parameters
# sigma: annualized volatility, mu: annualized drift
SYMBOL_PARAMS: dict[str, dict[str, float]] = {
    "AAPL": {"sigma": 0.22, "mu": 0.05},
    "GOOGL": {"sigma": 0.25, "mu": 0.05},
    "MSFT": {"sigma": 0.20, "mu": 0.05},
    "AMZN": {"sigma": 0.28, "mu": 0.05},
    "TSLA": {"sigma": 0.50, "mu": 0.03},
    "NVDA": {"sigma": 0.40, "mu": 0.08},
    "JPM": {"sigma": 0.18, "mu": 0.04},
    "V": {"sigma": 0.17, "mu": 0.04},
}

# Symbols added at runtime that are not listed above
DEFAULT_PARAMS: dict[str, float] = {"sigma": 0.25, "mu": 0.05}

# Pairwise correlation induced by the shared market factor
MARKET_CORRELATION = 0.3

# Lowest price the simulator will quote
MIN_PRICE = 0.01
