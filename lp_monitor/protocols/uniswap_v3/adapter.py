"""Uniswap V3 adapter: walks a wallet's position NFTs into PositionStats."""
from __future__ import annotations

import logging
from collections.abc import Mapping

from ...interfaces.chain import ChainClient
from ...interfaces.token_resolver import TokenReferenceResolver
from ...tokens import get_token_by_address
from .position import Pool, Position
from .stats import PositionStats

logger = logging.getLogger(__name__)


class UniswapV3Adapter:
    """Fetch and enrich Uniswap V3 LP positions owned by a wallet."""

    def __init__(
        self, chain_client: ChainClient, scale_corrections: Mapping[str, float]
    ) -> None:
        self._client = chain_client
        self._scale_corrections = dict(scale_corrections)

    async def _get_pool(self, pool_address: str) -> Pool:
        """Read a pool's immutables and live state and resolve its tokens."""
        immutables = await self._client.get_pool_immutables(pool_address)
        state = await self._client.get_pool_state(pool_address)
        return Pool(
            token0=get_token_by_address(immutables.token0),
            token1=get_token_by_address(immutables.token1),
            fee=immutables.fee,
            sqrt_price_x96=state.sqrt_price_x96,
            liquidity=state.liquidity,
            tick_current=state.tick,
        )

    async def fetch_positions(
        self, wallet_address: str, resolver: TokenReferenceResolver
    ) -> list[PositionStats]:
        """Fetch every position of ``wallet_address`` in registry order.

        Reads are sequential and any failure propagates; no partial list is
        ever returned.
        """
        await self._client.verify_chain()
        count = await self._client.balance_of(wallet_address)
        logger.info("Wallet %s holds %d position NFTs", wallet_address, count)

        positions: list[PositionStats] = []
        for index in range(count):
            token_id = await self._client.token_of_owner_by_index(wallet_address, index)
            state = await self._client.get_position_state(token_id)

            pool_address = await self._client.get_pool_address(
                state.token0, state.token1, state.fee
            )
            logger.debug(
                "Position %s: pool %s ticks [%d, %d)",
                token_id, pool_address, state.tick_lower, state.tick_upper,
            )

            position = Position(
                pool=await self._get_pool(pool_address),
                liquidity=state.liquidity,
                tick_lower=state.tick_lower,
                tick_upper=state.tick_upper,
            )
            fees = await self._client.collect_fees(wallet_address, token_id)

            positions.append(
                PositionStats(
                    wallet_address,
                    str(token_id),
                    position,
                    resolver,
                    fees,
                    self._scale_corrections,
                )
            )

        return positions
