"""Closed table of tokens the reporter knows how to price."""
from __future__ import annotations

from .models import Token

MAINNET_CHAIN_ID = 1

# WETH is declared with 8 decimals; the missing 10 orders of magnitude are
# removed by the WETH entry of the scale-correction table.
KNOWN_TOKENS: dict[str, Token] = {
    token.address.lower(): token
    for token in (
        Token(MAINNET_CHAIN_ID, "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48", 6, "USDC", "USD Coin"),
        Token(MAINNET_CHAIN_ID, "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2", 8, "WETH", "Wrapped Ether"),
        Token(MAINNET_CHAIN_ID, "0xdAC17F958D2ee523a2206206994597C13D831ec7", 6, "USDT", "Tether USD"),
        Token(MAINNET_CHAIN_ID, "0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599", 8, "WBTC", "Wrapped BTC"),
    )
}


def get_token_by_address(address: str) -> Token:
    """Return the known token at ``address`` (case-insensitive).

    Raises:
        ValueError: if the address is not in the table.
    """
    try:
        return KNOWN_TOKENS[address.lower()]
    except KeyError:
        raise ValueError(f"Unknown token address {address}") from None
