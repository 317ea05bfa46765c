"""Car rental valuation and lookup."""

__version__ = "0.1.0"
