"""Position enrichment: raw on-chain amounts to priced token quantities."""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ...interfaces.token_resolver import TokenReferenceResolver
from ...models import Fees, Token
from .parser import to_quantity
from .position import Position


class Amount:
    """A token quantity that can be valued in the resolver's reference currency."""

    def __init__(
        self, token: Token, amount: int | float, resolver: TokenReferenceResolver
    ) -> None:
        self.token = token
        self.amount = float(amount)
        self._resolver = resolver

    async def to_referenced_quote(self) -> float:
        """Value of this amount; the resolver is asked again on every call."""
        return await self._resolver.get_quote(self.token) * self.amount

    async def describe(self) -> str:
        quote = await self.to_referenced_quote()
        return (
            f"{self.amount} {self.token.symbol} "
            f"({quote} {self._resolver.referenced_token})"
        )

    def __repr__(self) -> str:
        return f"Amount({self.amount!r}, {self.token.symbol})"


@dataclass(frozen=True)
class TokenSide:
    liquidity: Amount
    fee: Amount


@dataclass(frozen=True)
class RangedTokenSide(TokenSide):
    # Reserved for range-bound values; never populated yet.
    range_min: Amount | None = None
    range_max: Amount | None = None


class PositionStats:
    """One LP position with liquidity and uncollected fees per token."""

    def __init__(
        self,
        owner: str,
        position_id: str,
        position: Position,
        resolver: TokenReferenceResolver,
        fees: Fees,
        scale_corrections: Mapping[str, float],
    ) -> None:
        self.owner = owner
        self.id = position_id
        self.position = position
        self._resolver = resolver

        pool = position.pool
        self.token0 = RangedTokenSide(
            liquidity=self._amount(pool.token0, position.amount0, scale_corrections),
            fee=self._amount(pool.token0, fees.fee0, scale_corrections),
        )
        self.token1 = TokenSide(
            liquidity=self._amount(pool.token1, position.amount1, scale_corrections),
            fee=self._amount(pool.token1, fees.fee1, scale_corrections),
        )

    def _amount(
        self, token: Token, raw_amount: int, scale_corrections: Mapping[str, float]
    ) -> Amount:
        quantity = to_quantity(
            raw_amount, token.decimals, token.symbol, scale_corrections
        )
        return Amount(token, quantity, self._resolver)

    async def total_liquidity(self) -> float:
        return (
            await self.token0.liquidity.to_referenced_quote()
            + await self.token1.liquidity.to_referenced_quote()
        )

    async def total_fees(self) -> float:
        return (
            await self.token0.fee.to_referenced_quote()
            + await self.token1.fee.to_referenced_quote()
        )

    def in_range(self) -> bool:
        """Half-open: in range at the lower tick, out of range at the upper."""
        tick = self.position.pool.tick_current
        return self.position.tick_lower <= tick < self.position.tick_upper
