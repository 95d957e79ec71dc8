"""Uniswap V3 LP position reporter."""

__version__ = "0.1.0"
