"""Price quote providers."""
from .coinmarketcap import CoinMarketCapClient

__all__ = ["CoinMarketCapClient"]
