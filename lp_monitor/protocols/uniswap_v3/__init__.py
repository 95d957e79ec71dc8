"""Uniswap V3 position support."""
from .adapter import UniswapV3Adapter
from .stats import Amount, PositionStats

__all__ = ["Amount", "PositionStats", "UniswapV3Adapter"]
