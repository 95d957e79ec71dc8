"""Position source: wallet to enriched position records."""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from .token_resolver import TokenReferenceResolver

if TYPE_CHECKING:
    from ..protocols.uniswap_v3.stats import PositionStats


class PositionSource(Protocol):
    """Abstract interface for fetching every LP position a wallet holds."""

    async def fetch_positions(
        self, wallet_address: str, resolver: TokenReferenceResolver
    ) -> list[PositionStats]: ...
