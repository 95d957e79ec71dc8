"""Chain client protocol: read-only Uniswap V3 contract calls."""
from typing import Protocol

from ..models import Fees, PoolImmutables, PoolState, PositionState


class ChainClient(Protocol):
    """Abstract interface for the on-chain reads the pipeline needs."""

    async def verify_chain(self) -> None: ...

    async def balance_of(self, owner: str) -> int: ...

    async def token_of_owner_by_index(self, owner: str, index: int) -> int: ...

    async def get_position_state(self, token_id: int) -> PositionState: ...

    async def get_pool_address(self, token0: str, token1: str, fee: int) -> str: ...

    async def get_pool_immutables(self, pool_address: str) -> PoolImmutables: ...

    async def get_pool_state(self, pool_address: str) -> PoolState: ...

    async def collect_fees(self, owner: str, token_id: int) -> Fees: ...
