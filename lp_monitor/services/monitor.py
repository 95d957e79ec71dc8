"""Report loop: fetch positions, write the report file, sleep, repeat."""
from __future__ import annotations

import asyncio
import logging

from ..chains.evm import EvmClient
from ..config import AppConfig
from ..interfaces.position_source import PositionSource
from ..interfaces.token_resolver import TokenReferenceResolver
from ..oracles import CoinMarketCapClient
from ..protocols.uniswap_v3 import UniswapV3Adapter
from .price_service import CachedTokenResolver, QuoteCache
from .report import ReportRenderer, ReportTotals

logger = logging.getLogger(__name__)


class Monitor:
    """Writes the wallet's LP position report on a fixed interval."""

    def __init__(self, config: AppConfig) -> None:
        self._config = config
        self._address = config.wallet.address
        self._output_file = config.report.output_file

        self._adapter: PositionSource = UniswapV3Adapter(
            EvmClient(config.chain), config.tokens.scale_corrections
        )
        self._resolver: TokenReferenceResolver = CachedTokenResolver(
            CoinMarketCapClient(config.quotes),
            config.quotes.convert,
            QuoteCache(max_age=config.quotes.max_age_seconds),
        )
        self._renderer = ReportRenderer(config.quotes.convert)

    async def run_once(self) -> ReportTotals:
        """Run one report cycle and return its totals.

        The file is truncated before any read, so a failure part-way through
        leaves it empty or incomplete.
        """
        with open(self._output_file, "w") as out:
            liquidity_sum = 0.0
            fee_sum = 0.0
            positions = await self._adapter.fetch_positions(self._address, self._resolver)
            for position in positions:
                text, liquidity, fees = await self._renderer.render_position(position)
                liquidity_sum += liquidity
                fee_sum += fees
                out.write(text)

            totals = ReportTotals(liquidity=liquidity_sum, fees=fee_sum)
            out.write(self._renderer.render_totals(totals))

        logger.info("Refreshed")
        logger.debug(
            "%d positions: liquidity %.2f, fees %.2f %s",
            len(positions), totals.liquidity, totals.fees, self._config.quotes.convert,
        )
        return totals

    async def run_continuous(self, interval_seconds: float | None = None) -> None:
        """Run report cycles forever; an error ends the loop."""
        interval = interval_seconds
        if interval is None:
            interval = self._config.report.refresh_interval_seconds
        logger.info(
            "Starting report loop for %s (refreshing every %g seconds)",
            self._address, interval,
        )

        while True:
            await self.run_once()
            await asyncio.sleep(interval)
