"""Unit tests for data models and the known-token table."""
from __future__ import annotations

import pytest

from lp_monitor.models import Fees, PoolState, PositionState, Token
from lp_monitor.tokens import KNOWN_TOKENS, MAINNET_CHAIN_ID, get_token_by_address


class TestToken:
    def test_frozen(self, usdc: Token) -> None:
        with pytest.raises(AttributeError):
            usdc.decimals = 18  # type: ignore[misc]

    def test_equality(self) -> None:
        a = Token(1, "0x1", 6, "AAA")
        b = Token(1, "0x1", 6, "AAA")
        assert a == b


class TestPositionState:
    def test_defaults(self) -> None:
        p = PositionState(
            nonce=0,
            operator="0x0",
            token0="0xa",
            token1="0xb",
            fee=3000,
            tick_lower=-60,
            tick_upper=60,
            liquidity=10,
        )
        assert p.tokens_owed0 == 0
        assert p.fee_growth_inside1_last_x128 == 0

    def test_pool_state_defaults(self) -> None:
        s = PoolState(liquidity=1, sqrt_price_x96=2, tick=3)
        assert s.unlocked is True
        assert s.fee_protocol == 0

    def test_fees_frozen(self) -> None:
        f = Fees(fee0=1, fee1=2)
        with pytest.raises(AttributeError):
            f.fee0 = 5  # type: ignore[misc]


class TestKnownTokens:
    def test_table_contents(self) -> None:
        by_symbol = {t.symbol: t for t in KNOWN_TOKENS.values()}
        assert set(by_symbol) == {"USDC", "WETH", "USDT", "WBTC"}
        assert by_symbol["USDC"].decimals == 6
        assert by_symbol["USDT"].decimals == 6
        assert by_symbol["WBTC"].decimals == 8
        # corrected through the WETH scale factor
        assert by_symbol["WETH"].decimals == 8
        assert all(t.chain_id == MAINNET_CHAIN_ID for t in by_symbol.values())

    def test_lookup_by_address(self, weth: Token) -> None:
        token = get_token_by_address(weth.address)
        assert token is weth

    def test_lookup_is_case_insensitive(self, usdc: Token) -> None:
        assert get_token_by_address(usdc.address.lower()) is usdc
        assert get_token_by_address("0x" + usdc.address[2:].upper()) is usdc

    def test_unknown_address_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown token address 0xdead"):
            get_token_by_address("0xdead")
