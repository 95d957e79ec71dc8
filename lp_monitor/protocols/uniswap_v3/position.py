"""Pool and position domain objects."""
from __future__ import annotations

from dataclasses import dataclass

from ...models import Token
from .math import get_amounts_for_liquidity


@dataclass(frozen=True)
class Pool:
    """Live pool snapshot with its tokens resolved."""

    token0: Token
    token1: Token
    fee: int
    sqrt_price_x96: int
    liquidity: int
    tick_current: int


@dataclass(frozen=True)
class Position:
    """A liquidity range in a pool; amounts are raw token integers."""

    pool: Pool
    liquidity: int
    tick_lower: int
    tick_upper: int

    def __post_init__(self) -> None:
        if self.tick_lower >= self.tick_upper:
            raise ValueError(
                f"Invalid tick range [{self.tick_lower}, {self.tick_upper})"
            )

    def _amounts(self) -> tuple[int, int]:
        return get_amounts_for_liquidity(
            self.pool.tick_current,
            self.pool.sqrt_price_x96,
            self.tick_lower,
            self.tick_upper,
            self.liquidity,
        )

    @property
    def amount0(self) -> int:
        return self._amounts()[0]

    @property
    def amount1(self) -> int:
        return self._amounts()[1]
