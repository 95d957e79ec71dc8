"""Minimal ABIs for the read-only Uniswap V3 calls the reporter makes."""
from __future__ import annotations

from typing import Any


def _fn(
    name: str,
    inputs: list[tuple[str, str]],
    outputs: list[tuple[str, str]],
    mutability: str = "view",
) -> dict[str, Any]:
    return {
        "name": name,
        "type": "function",
        "stateMutability": mutability,
        "inputs": [{"name": n, "type": t} for n, t in inputs],
        "outputs": [{"name": n, "type": t} for n, t in outputs],
    }


POSITION_MANAGER_ABI: list[dict[str, Any]] = [
    _fn("balanceOf", [("owner", "address")], [("", "uint256")]),
    _fn(
        "tokenOfOwnerByIndex",
        [("owner", "address"), ("index", "uint256")],
        [("", "uint256")],
    ),
    _fn(
        "positions",
        [("tokenId", "uint256")],
        [
            ("nonce", "uint96"),
            ("operator", "address"),
            ("token0", "address"),
            ("token1", "address"),
            ("fee", "uint24"),
            ("tickLower", "int24"),
            ("tickUpper", "int24"),
            ("liquidity", "uint128"),
            ("feeGrowthInside0LastX128", "uint256"),
            ("feeGrowthInside1LastX128", "uint256"),
            ("tokensOwed0", "uint128"),
            ("tokensOwed1", "uint128"),
        ],
    ),
    {
        "name": "collect",
        "type": "function",
        "stateMutability": "payable",
        "inputs": [
            {
                "name": "params",
                "type": "tuple",
                "internalType": "struct INonfungiblePositionManager.CollectParams",
                "components": [
                    {"name": "tokenId", "type": "uint256"},
                    {"name": "recipient", "type": "address"},
                    {"name": "amount0Max", "type": "uint128"},
                    {"name": "amount1Max", "type": "uint128"},
                ],
            }
        ],
        "outputs": [
            {"name": "amount0", "type": "uint256"},
            {"name": "amount1", "type": "uint256"},
        ],
    },
]

FACTORY_ABI: list[dict[str, Any]] = [
    _fn(
        "getPool",
        [("tokenA", "address"), ("tokenB", "address"), ("fee", "uint24")],
        [("pool", "address")],
    ),
]

POOL_ABI: list[dict[str, Any]] = [
    _fn("factory", [], [("", "address")]),
    _fn("token0", [], [("", "address")]),
    _fn("token1", [], [("", "address")]),
    _fn("fee", [], [("", "uint24")]),
    _fn("tickSpacing", [], [("", "int24")]),
    _fn("maxLiquidityPerTick", [], [("", "uint128")]),
    _fn("liquidity", [], [("", "uint128")]),
    _fn(
        "slot0",
        [],
        [
            ("sqrtPriceX96", "uint160"),
            ("tick", "int24"),
            ("observationIndex", "uint16"),
            ("observationCardinality", "uint16"),
            ("observationCardinalityNext", "uint16"),
            ("feeProtocol", "uint8"),
            ("unlocked", "bool"),
        ],
    ),
]
