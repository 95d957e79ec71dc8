"""Data models: all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """ERC-20 token known to the reporter."""

    chain_id: int
    address: str
    decimals: int
    symbol: str
    name: str = ""


@dataclass(frozen=True)
class Fees:
    """Raw uncollected fee amounts, in each token's native integer precision."""

    fee0: int
    fee1: int


@dataclass(frozen=True)
class PoolImmutables:
    factory: str
    token0: str
    token1: str
    fee: int
    tick_spacing: int
    max_liquidity_per_tick: int


@dataclass(frozen=True)
class PoolState:
    liquidity: int
    sqrt_price_x96: int
    tick: int
    observation_index: int = 0
    observation_cardinality: int = 0
    observation_cardinality_next: int = 0
    fee_protocol: int = 0
    unlocked: bool = True


@dataclass(frozen=True)
class PositionState:
    """Position as stored by the NonfungiblePositionManager."""

    nonce: int
    operator: str
    token0: str
    token1: str
    fee: int
    tick_lower: int
    tick_upper: int
    liquidity: int
    fee_growth_inside0_last_x128: int = 0
    fee_growth_inside1_last_x128: int = 0
    tokens_owed0: int = 0
    tokens_owed1: int = 0
