"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path
from types import SimpleNamespace

import pytest

from lp_monitor.config import (
    AppConfig,
    ChainConfig,
    QuotesConfig,
    ReportConfig,
    TokensConfig,
    WalletConfig,
)
from lp_monitor.models import Token
from lp_monitor.protocols.uniswap_v3.stats import Amount, RangedTokenSide, TokenSide
from lp_monitor.tokens import get_token_by_address

USDC_ADDRESS = "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48"
WETH_ADDRESS = "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
USDT_ADDRESS = "0xdAC17F958D2ee523a2206206994597C13D831ec7"
WBTC_ADDRESS = "0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599"

WALLET = "0x" + "ab" * 20


class StubResolver:
    """Fixed-price resolver that counts lookups."""

    def __init__(self, prices: dict[str, float], referenced_token: str = "EUR") -> None:
        self.prices = dict(prices)
        self.referenced_token = referenced_token
        self.calls: list[str] = []

    async def get_quote(self, token: Token) -> float:
        self.calls.append(token.symbol)
        return self.prices[token.symbol]


# ---------------------------------------------------------------------------
# Token fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def usdc() -> Token:
    return get_token_by_address(USDC_ADDRESS)


@pytest.fixture()
def weth() -> Token:
    return get_token_by_address(WETH_ADDRESS)


@pytest.fixture()
def usdt() -> Token:
    return get_token_by_address(USDT_ADDRESS)


@pytest.fixture()
def wbtc() -> Token:
    return get_token_by_address(WBTC_ADDRESS)


@pytest.fixture()
def sample_prices() -> dict[str, float]:
    return {"USDC": 1.0, "USDT": 1.0, "WETH": 2000.0, "WBTC": 32000.0}


@pytest.fixture()
def stub_resolver(sample_prices: dict[str, float]) -> StubResolver:
    return StubResolver(sample_prices)


@pytest.fixture()
def record_factory():
    """Build a report record from (token, liquidity, fee) per side."""

    def _make(side0: tuple, side1: tuple, resolver) -> SimpleNamespace:
        token0, liquidity0, fee0 = side0
        token1, liquidity1, fee1 = side1
        return SimpleNamespace(
            token0=RangedTokenSide(
                liquidity=Amount(token0, liquidity0, resolver),
                fee=Amount(token0, fee0, resolver),
            ),
            token1=TokenSide(
                liquidity=Amount(token1, liquidity1, resolver),
                fee=Amount(token1, fee1, resolver),
            ),
        )

    return _make


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_chain_config() -> ChainConfig:
    return ChainConfig(rpc_url="http://localhost:8545", rpc_timeout=10)


@pytest.fixture()
def sample_quotes_config() -> QuotesConfig:
    return QuotesConfig(
        api_key="fake-cmc-key",
        convert="EUR",
        base_url="https://cmc.example.com",
        max_age_seconds=7200,
        timeout=10,
    )


@pytest.fixture()
def sample_app_config(
    tmp_path: Path,
    sample_chain_config: ChainConfig,
    sample_quotes_config: QuotesConfig,
) -> AppConfig:
    return AppConfig(
        wallet=WalletConfig(address=WALLET),
        chain=sample_chain_config,
        quotes=sample_quotes_config,
        report=ReportConfig(
            output_file=str(tmp_path / "report.txt"), refresh_interval_seconds=120
        ),
        tokens=TokensConfig(),
    )


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    wallet:
      address: "0xTEST"
    chain:
      rpc_url: "https://rpc.example.com"
      rpc_timeout: 10
      contracts:
        position_manager: "0xC36442b4a4522E871399CD717aBDD847Ab11FE88"
        factory: "0x1F98431c8aD98523631AE4a59f267346ea31F984"
    quotes:
      api_key: "cmc-key"
      convert: EUR
      max_age_seconds: 3600
    report:
      output_file: /tmp/report.txt
      refresh_interval_seconds: 60
    tokens:
      scale_corrections: {WETH: 10000000000}
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file
