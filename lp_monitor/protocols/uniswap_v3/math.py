"""Uniswap V3 fixed-point math: tick to sqrt price, liquidity to token amounts.

Integer arithmetic mirrors TickMath / SqrtPriceMath from v3-core, so results
match the on-chain (and SDK) values exactly, rounding down.
"""
from __future__ import annotations

MIN_TICK = -887272
MAX_TICK = 887272

Q96 = 1 << 96
Q256 = 1 << 256

_TICK_RATIO_MULTIPLIERS = (
    (0x2, 0xFFF97272373D413259A46990580E213A),
    (0x4, 0xFFF2E50F5F656932EF12357CF3C7FDCC),
    (0x8, 0xFFE5CACA7E10E4E61C3624EAA0941CD0),
    (0x10, 0xFFCB9843D60F6159C9DB58835C926644),
    (0x20, 0xFF973B41FA98C081472E6896DFB254C0),
    (0x40, 0xFF2EA16466C96A3843EC78B326B52861),
    (0x80, 0xFE5DEE046A99A2A811C461F1969C3053),
    (0x100, 0xFCBE86C7900A88AEDCFFC83B479AA3A4),
    (0x200, 0xF987A7253AC413176F2B074CF7815E54),
    (0x400, 0xF3392B0822B70005940C7A398E4B70F3),
    (0x800, 0xE7159475A2C29B7443B29C7FA6E889D9),
    (0x1000, 0xD097F3BDFD2022B8845AD8F792AA5825),
    (0x2000, 0xA9F746462D870FDF8A65DC1F90E061E5),
    (0x4000, 0x70D869A156D2A1B890BB3DF62BAF32F7),
    (0x8000, 0x31BE135F97D08FD981231505542FCFA6),
    (0x10000, 0x9AA508B5B7A84E1C677DE54F3E99BC9),
    (0x20000, 0x5D6AF8DEDB81196699C329225EE604),
    (0x40000, 0x2216E584F5FA1EA926041BEDFE98),
    (0x80000, 0x48A170391F7DC42444E8FA2),
)


def get_sqrt_ratio_at_tick(tick: int) -> int:
    """Return sqrt(1.0001^tick) as a Q64.96 fixed-point integer."""
    abs_tick = abs(tick)
    if abs_tick > MAX_TICK:
        raise ValueError(f"Tick {tick} out of range")

    if abs_tick & 0x1:
        ratio = 0xFFFCB933BD6FAD37AA2D162D1A594001
    else:
        ratio = 0x100000000000000000000000000000000

    for mask, multiplier in _TICK_RATIO_MULTIPLIERS:
        if abs_tick & mask:
            ratio = (ratio * multiplier) >> 128

    if tick > 0:
        ratio = (Q256 - 1) // ratio

    # Round up when converting from Q128.128 to Q128.96
    return (ratio >> 32) + (1 if ratio % (1 << 32) else 0)


def get_amount0_delta(sqrt_ratio_a: int, sqrt_ratio_b: int, liquidity: int) -> int:
    """Amount of token0 between two sqrt prices, rounded down."""
    if sqrt_ratio_a > sqrt_ratio_b:
        sqrt_ratio_a, sqrt_ratio_b = sqrt_ratio_b, sqrt_ratio_a
    numerator1 = liquidity << 96
    numerator2 = sqrt_ratio_b - sqrt_ratio_a
    return (numerator1 * numerator2 // sqrt_ratio_b) // sqrt_ratio_a


def get_amount1_delta(sqrt_ratio_a: int, sqrt_ratio_b: int, liquidity: int) -> int:
    """Amount of token1 between two sqrt prices, rounded down."""
    if sqrt_ratio_a > sqrt_ratio_b:
        sqrt_ratio_a, sqrt_ratio_b = sqrt_ratio_b, sqrt_ratio_a
    return liquidity * (sqrt_ratio_b - sqrt_ratio_a) // Q96


def get_amounts_for_liquidity(
    tick_current: int,
    sqrt_price_x96: int,
    tick_lower: int,
    tick_upper: int,
    liquidity: int,
) -> tuple[int, int]:
    """Token amounts a position's liquidity is worth at the current pool price.

    Below the range the position is entirely token0, above it entirely token1.
    """
    sqrt_lower = get_sqrt_ratio_at_tick(tick_lower)
    sqrt_upper = get_sqrt_ratio_at_tick(tick_upper)

    if tick_current < tick_lower:
        return get_amount0_delta(sqrt_lower, sqrt_upper, liquidity), 0
    if tick_current < tick_upper:
        return (
            get_amount0_delta(sqrt_price_x96, sqrt_upper, liquidity),
            get_amount1_delta(sqrt_lower, sqrt_price_x96, liquidity),
        )
    return 0, get_amount1_delta(sqrt_lower, sqrt_upper, liquidity)
