"""MT5 Journal - trading journal built from MetaTrader 5 deal reports."""

__version__ = "0.1.0"
