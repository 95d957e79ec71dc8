"""Unit tests for Uniswap V3 decoding and unscaling: pure functions, no I/O."""
from __future__ import annotations

import pytest

from lp_monitor.models import Fees, PoolState, PositionState
from lp_monitor.protocols.uniswap_v3.parser import (
    decode_collect_result,
    decode_pool_immutables,
    decode_pool_state,
    decode_position_state,
    scale_divisor,
    to_quantity,
    unraw_currency,
)

WETH_CORRECTIONS = {"WETH": 10_000_000_000}


# ---------------------------------------------------------------------------
# Unscaling
# ---------------------------------------------------------------------------


class TestUnrawCurrency:
    def test_six_decimals(self) -> None:
        assert unraw_currency(1_500_000, 6) == 1.5

    def test_zero(self) -> None:
        assert unraw_currency(0, 8) == 0.0

    def test_returns_float(self) -> None:
        assert isinstance(unraw_currency(10**6, 6), float)


class TestScaleDivisor:
    def test_unlisted_symbol_is_one(self) -> None:
        assert scale_divisor("USDC", WETH_CORRECTIONS) == 1

    def test_listed_symbol(self) -> None:
        assert scale_divisor("WETH", WETH_CORRECTIONS) == 1e10

    def test_empty_table(self) -> None:
        assert scale_divisor("WETH", {}) == 1


class TestToQuantity:
    def test_plain_token(self) -> None:
        assert to_quantity(2_500_000, 6, "USDC", WETH_CORRECTIONS) == 2.5

    def test_weth_eighteen_decimal_raw(self) -> None:
        # 0.001 ETH on chain; WETH is declared with 8 decimals
        assert to_quantity(10**15, 8, "WETH", WETH_CORRECTIONS) == 0.001

    def test_weth_without_correction(self) -> None:
        assert to_quantity(10**15, 8, "WETH", {}) == pytest.approx(1e7)


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class TestDecodePositionState:
    def test_full_tuple(self) -> None:
        raw = (
            0, "0x0000000000000000000000000000000000000000", "0xA", "0xB",
            3000, -887220, 887220, 123456789, 11, 22, 33, 44,
        )
        state = decode_position_state(raw)
        assert isinstance(state, PositionState)
        assert state.token0 == "0xA"
        assert state.token1 == "0xB"
        assert state.fee == 3000
        assert state.tick_lower == -887220
        assert state.tick_upper == 887220
        assert state.liquidity == 123456789
        assert state.fee_growth_inside0_last_x128 == 11
        assert state.fee_growth_inside1_last_x128 == 22
        assert state.tokens_owed0 == 33
        assert state.tokens_owed1 == 44


class TestDecodePoolState:
    def test_slot0_and_liquidity(self) -> None:
        slot0 = (2**96, -5, 7, 100, 120, 0, True)
        state = decode_pool_state(slot0, 555)
        assert state == PoolState(
            liquidity=555,
            sqrt_price_x96=2**96,
            tick=-5,
            observation_index=7,
            observation_cardinality=100,
            observation_cardinality_next=120,
            fee_protocol=0,
            unlocked=True,
        )


class TestDecodePoolImmutables:
    def test_fields(self) -> None:
        imm = decode_pool_immutables("0xF", "0xA", "0xB", 500, 10, 2**100)
        assert imm.factory == "0xF"
        assert imm.fee == 500
        assert imm.tick_spacing == 10
        assert imm.max_liquidity_per_tick == 2**100


class TestDecodeCollectResult:
    def test_pair(self) -> None:
        assert decode_collect_result([1_500_000, 10**15]) == Fees(1_500_000, 10**15)
