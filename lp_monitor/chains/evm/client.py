"""EVM RPC client for Uniswap V3 position reads."""
from __future__ import annotations

import logging

import aiohttp
from web3 import AsyncWeb3, Web3

from ...config import ChainConfig
from ...models import Fees, PoolImmutables, PoolState, PositionState
from ...protocols.uniswap_v3 import parser
from .abis import FACTORY_ABI, POOL_ABI, POSITION_MANAGER_ABI

logger = logging.getLogger(__name__)

MAX_UINT128 = 2**128 - 1


class EvmClient:
    """Read-only contract calls against the position manager, factory and pools."""

    def __init__(self, config: ChainConfig, w3: AsyncWeb3 | None = None) -> None:
        self.rpc_url = config.rpc_url
        self.timeout = config.rpc_timeout
        self.chain_id = config.chain_id
        if w3 is None:
            w3 = AsyncWeb3(
                AsyncWeb3.AsyncHTTPProvider(
                    self.rpc_url,
                    request_kwargs={"timeout": aiohttp.ClientTimeout(total=self.timeout)},
                )
            )
        self._w3 = w3
        self._position_manager = self._w3.eth.contract(
            address=Web3.to_checksum_address(config.position_manager),
            abi=POSITION_MANAGER_ABI,
        )
        self._factory = self._w3.eth.contract(
            address=Web3.to_checksum_address(config.factory),
            abi=FACTORY_ABI,
        )

    def _pool_contract(self, pool_address: str):
        return self._w3.eth.contract(
            address=Web3.to_checksum_address(pool_address), abi=POOL_ABI
        )

    async def verify_chain(self) -> None:
        """Raise if the RPC endpoint serves a different chain than configured."""
        actual = await self._w3.eth.chain_id
        if actual != self.chain_id:
            raise RuntimeError(
                f"RPC endpoint {self.rpc_url} is on chain {actual}, expected {self.chain_id}"
            )

    async def balance_of(self, owner: str) -> int:
        """Number of position NFTs held by ``owner``."""
        owner = Web3.to_checksum_address(owner)
        return int(await self._position_manager.functions.balanceOf(owner).call())

    async def token_of_owner_by_index(self, owner: str, index: int) -> int:
        owner = Web3.to_checksum_address(owner)
        token_id = await self._position_manager.functions.tokenOfOwnerByIndex(
            owner, index
        ).call()
        return int(token_id)

    async def get_position_state(self, token_id: int) -> PositionState:
        raw = await self._position_manager.functions.positions(token_id).call()
        return parser.decode_position_state(raw)

    async def get_pool_address(self, token0: str, token1: str, fee: int) -> str:
        return await self._factory.functions.getPool(
            Web3.to_checksum_address(token0), Web3.to_checksum_address(token1), fee
        ).call()

    async def get_pool_immutables(self, pool_address: str) -> PoolImmutables:
        pool = self._pool_contract(pool_address)
        return parser.decode_pool_immutables(
            factory=await pool.functions.factory().call(),
            token0=await pool.functions.token0().call(),
            token1=await pool.functions.token1().call(),
            fee=await pool.functions.fee().call(),
            tick_spacing=await pool.functions.tickSpacing().call(),
            max_liquidity_per_tick=await pool.functions.maxLiquidityPerTick().call(),
        )

    async def get_pool_state(self, pool_address: str) -> PoolState:
        pool = self._pool_contract(pool_address)
        slot0 = await pool.functions.slot0().call()
        liquidity = await pool.functions.liquidity().call()
        return parser.decode_pool_state(slot0, liquidity)

    async def collect_fees(self, owner: str, token_id: int) -> Fees:
        """Simulate ``collect`` as the owner to read the claimable fees.

        The stored ``tokensOwed`` lags behind accrual; only a collect call
        settles the pending fee growth, so it is run as an ``eth_call``.
        """
        owner = Web3.to_checksum_address(owner)
        # CollectParams(tokenId, recipient, amount0Max, amount1Max)
        params = (token_id, owner, MAX_UINT128, MAX_UINT128)
        result = await self._position_manager.functions.collect(params).call(
            {"from": owner}
        )
        fees = parser.decode_collect_result(result)
        logger.debug(
            "Uncollected fees for position %s: %d / %d", token_id, fees.fee0, fees.fee1
        )
        return fees
