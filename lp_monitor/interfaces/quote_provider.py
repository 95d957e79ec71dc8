"""Quote provider protocol: external price API abstraction."""
from typing import Protocol


class QuoteProvider(Protocol):
    """Abstract interface for fetching a symbol's price in another currency."""

    async def get_quote(self, symbol: str, convert: str) -> float: ...
