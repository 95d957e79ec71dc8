"""Quote cache and token resolver over a QuoteProvider."""
from __future__ import annotations

import logging
import time
from collections.abc import Callable

from ..interfaces.quote_provider import QuoteProvider
from ..models import Token

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE_SECONDS = 7200.0


class QuoteCache:
    """Symbol → (fetched_at, price), stale after ``max_age`` seconds.

    Not safe for concurrent writers; the reporter runs a single task.
    """

    def __init__(
        self,
        max_age: float = DEFAULT_MAX_AGE_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.max_age = max_age
        self._clock = clock
        self._entries: dict[str, tuple[float, float]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, symbol: str) -> tuple[float, float] | None:
        return self._entries.get(symbol)

    def put(self, symbol: str, price: float) -> None:
        self._entries[symbol] = (self._clock(), price)

    def is_fresh(self, symbol: str) -> bool:
        entry = self._entries.get(symbol)
        if entry is None:
            return False
        return self._clock() - entry[0] <= self.max_age


class CachedTokenResolver:
    """Prices tokens in ``referenced_token``, refetching stale quotes."""

    def __init__(
        self, provider: QuoteProvider, referenced_token: str, cache: QuoteCache
    ) -> None:
        self.referenced_token = referenced_token
        self._provider = provider
        self._cache = cache

    async def get_quote(self, token: Token) -> float:
        # Keyed by symbol only: same-symbol tokens share a price.
        if not self._cache.is_fresh(token.symbol):
            logger.debug("Quote for %s missing or stale, refreshing", token.symbol)
            price = await self._provider.get_quote(token.symbol, self.referenced_token)
            self._cache.put(token.symbol, price)
        return self._cache.get(token.symbol)[1]
