"""Configuration loader: reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_POSITION_MANAGER = "0xC36442b4a4522E871399CD717aBDD847Ab11FE88"
DEFAULT_FACTORY = "0x1F98431c8aD98523631AE4a59f267346ea31F984"

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class WalletConfig:
    address: str = ""


@dataclass(frozen=True)
class ChainConfig:
    rpc_url: str = ""
    rpc_timeout: int = 30
    chain_id: int = 1
    position_manager: str = DEFAULT_POSITION_MANAGER
    factory: str = DEFAULT_FACTORY


@dataclass(frozen=True)
class QuotesConfig:
    api_key: str = ""
    convert: str = ""
    base_url: str = "https://pro-api.coinmarketcap.com"
    max_age_seconds: float = 7200.0
    timeout: int = 30


@dataclass(frozen=True)
class ReportConfig:
    output_file: str = ""
    refresh_interval_seconds: float = 120.0


@dataclass(frozen=True)
class TokensConfig:
    scale_corrections: dict[str, float] = field(
        default_factory=lambda: {"WETH": 10_000_000_000}
    )


@dataclass(frozen=True)
class AppConfig:
    wallet: WalletConfig = field(default_factory=WalletConfig)
    chain: ChainConfig = field(default_factory=ChainConfig)
    quotes: QuotesConfig = field(default_factory=QuotesConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    tokens: TokensConfig = field(default_factory=TokensConfig)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} references with environment variable values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(lambda m: os.environ.get(m.group(1), ""), value)
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_wallet(raw: dict[str, Any]) -> WalletConfig:
    return WalletConfig(address=str(raw.get("address", "")).strip())


def _build_chain(raw: dict[str, Any]) -> ChainConfig:
    contracts = raw.get("contracts", {}) or {}
    return ChainConfig(
        rpc_url=str(raw.get("rpc_url", "")).strip(),
        rpc_timeout=int(raw.get("rpc_timeout", 30)),
        chain_id=int(raw.get("chain_id", 1)),
        position_manager=contracts.get("position_manager", DEFAULT_POSITION_MANAGER),
        factory=contracts.get("factory", DEFAULT_FACTORY),
    )


def _build_quotes(raw: dict[str, Any]) -> QuotesConfig:
    return QuotesConfig(
        api_key=str(raw.get("api_key", "")).strip(),
        convert=str(raw.get("convert", "")).strip(),
        base_url=raw.get("base_url", QuotesConfig.base_url),
        max_age_seconds=float(raw.get("max_age_seconds", 7200)),
        timeout=int(raw.get("timeout", 30)),
    )


def _build_report(raw: dict[str, Any]) -> ReportConfig:
    return ReportConfig(
        output_file=str(raw.get("output_file", "")).strip(),
        refresh_interval_seconds=float(raw.get("refresh_interval_seconds", 120)),
    )


def _build_tokens(raw: dict[str, Any]) -> TokensConfig:
    if "scale_corrections" not in raw:
        return TokensConfig()
    corrections = raw.get("scale_corrections") or {}
    return TokensConfig(
        scale_corrections={str(k): float(v) for k, v in corrections.items()}
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (two levels up from this file).
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        wallet=_build_wallet(raw.get("wallet", {}) or {}),
        chain=_build_chain(raw.get("chain", {}) or {}),
        quotes=_build_quotes(raw.get("quotes", {}) or {}),
        report=_build_report(raw.get("report", {}) or {}),
        tokens=_build_tokens(raw.get("tokens", {}) or {}),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.wallet.address:
        raise ValueError("Wallet address is not configured (ADDRESS)")
    if not cfg.chain.rpc_url:
        raise ValueError("Chain RPC URL is not configured (RPC_URL)")
    if not cfg.quotes.api_key:
        raise ValueError("Quote API key is not configured (CMC_API_KEY)")
    if not cfg.quotes.convert:
        raise ValueError("Reference currency is not configured (COMPARE_TOKEN)")
    if not cfg.report.output_file:
        raise ValueError("Report output file is not configured (FILE)")

    for symbol, factor in cfg.tokens.scale_corrections.items():
        if factor <= 0:
            raise ValueError(
                f"Scale correction for '{symbol}' must be positive, got {factor}"
            )
