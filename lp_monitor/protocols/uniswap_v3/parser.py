"""Pure decoding and unscaling helpers for Uniswap V3 data: no I/O."""
from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from ...models import Fees, PoolImmutables, PoolState, PositionState


def unraw_currency(amount: int | float, decimals: int) -> float:
    """Convert a raw integer token amount to a token quantity."""
    return amount / 10**decimals


def scale_divisor(symbol: str, scale_corrections: Mapping[str, float]) -> float:
    """Per-symbol decimal-precision correction; 1 for symbols not listed."""
    return scale_corrections.get(symbol, 1)


def to_quantity(
    raw_amount: int | float,
    decimals: int,
    symbol: str,
    scale_corrections: Mapping[str, float],
) -> float:
    """Raw integer → token quantity, with the symbol's scale correction applied.

    quantity = raw / 10^decimals / correction
    """
    return unraw_currency(raw_amount, decimals) / scale_divisor(
        symbol, scale_corrections
    )


def decode_position_state(raw: Sequence[Any]) -> PositionState:
    """Decode the 12-field ``positions(tokenId)`` return tuple."""
    return PositionState(
        nonce=int(raw[0]),
        operator=raw[1],
        token0=raw[2],
        token1=raw[3],
        fee=int(raw[4]),
        tick_lower=int(raw[5]),
        tick_upper=int(raw[6]),
        liquidity=int(raw[7]),
        fee_growth_inside0_last_x128=int(raw[8]),
        fee_growth_inside1_last_x128=int(raw[9]),
        tokens_owed0=int(raw[10]),
        tokens_owed1=int(raw[11]),
    )


def decode_pool_state(slot0: Sequence[Any], liquidity: int) -> PoolState:
    """Decode the pool's ``slot0()`` tuple plus its active ``liquidity()``."""
    return PoolState(
        liquidity=int(liquidity),
        sqrt_price_x96=int(slot0[0]),
        tick=int(slot0[1]),
        observation_index=int(slot0[2]),
        observation_cardinality=int(slot0[3]),
        observation_cardinality_next=int(slot0[4]),
        fee_protocol=int(slot0[5]),
        unlocked=bool(slot0[6]),
    )


def decode_pool_immutables(
    factory: str,
    token0: str,
    token1: str,
    fee: int,
    tick_spacing: int,
    max_liquidity_per_tick: int,
) -> PoolImmutables:
    return PoolImmutables(
        factory=factory,
        token0=token0,
        token1=token1,
        fee=int(fee),
        tick_spacing=int(tick_spacing),
        max_liquidity_per_tick=int(max_liquidity_per_tick),
    )


def decode_collect_result(raw: Sequence[Any]) -> Fees:
    """Decode the ``(amount0, amount1)`` pair returned by a simulated collect."""
    return Fees(fee0=int(raw[0]), fee1=int(raw[1]))
