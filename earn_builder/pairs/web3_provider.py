"""Pair reserve provider backed by UniswapV2-style contracts via web3."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any, TypeVar

import structlog
from web3 import Web3

from earn_builder.errors import PairNotFoundError
from earn_builder.models.types import is_zero_address, normalize_address

logger = structlog.get_logger()

T = TypeVar("T")

# UniswapV2 factory ABI - minimal, just the functions we need
FACTORY_ABI = [
    {
        "name": "getPair",
        "type": "function",
        "stateMutability": "view",
        "inputs": [
            {"name": "tokenA", "type": "address"},
            {"name": "tokenB", "type": "address"},
        ],
        "outputs": [{"name": "pair", "type": "address"}],
    },
]

# UniswapV2 pair ABI
PAIR_ABI = [
    {
        "name": "token0",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "name": "token1",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "name": "factory",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "address"}],
    },
    {
        "name": "getReserves",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [
            {"name": "reserve0", "type": "uint112"},
            {"name": "reserve1", "type": "uint112"},
            {"name": "blockTimestampLast", "type": "uint32"},
        ],
    },
]


class Web3PairReserveProvider:
    """Provider that reads pairs from a UniswapV2 factory over RPC.

    web3 calls are blocking, so each one runs in the default thread executor;
    concurrent callers therefore issue their RPC requests in parallel.
    Errors from the RPC layer propagate unchanged (no retries here).
    """

    def __init__(self, w3: Web3, factory_address: str) -> None:
        """Initialize provider.

        Args:
            w3: Connected Web3 instance
            factory_address: UniswapV2-style factory contract address
        """
        self.w3 = w3
        self.factory = w3.eth.contract(
            address=Web3.to_checksum_address(factory_address),
            abi=FACTORY_ABI,
        )
        self._tokens_cache: dict[str, tuple[str, str]] = {}

    async def _run(self, fn: Callable[..., T], *args: Any) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, fn, *args)

    def _pair_contract(self, pair_id: str) -> Any:
        return self.w3.eth.contract(address=Web3.to_checksum_address(pair_id), abi=PAIR_ABI)

    def _get_pair_sync(self, token_a: str, token_b: str) -> str | None:
        pair = self.factory.functions.getPair(
            Web3.to_checksum_address(token_a),
            Web3.to_checksum_address(token_b),
        ).call()
        if is_zero_address(pair):
            return None
        return normalize_address(pair)

    def _pair_tokens_sync(self, pair_id: str) -> tuple[str, str]:
        cached = self._tokens_cache.get(pair_id)
        if cached is not None:
            return cached
        functions = self._pair_contract(pair_id).functions
        tokens = (
            normalize_address(functions.token0().call()),
            normalize_address(functions.token1().call()),
        )
        self._tokens_cache[pair_id] = tokens
        return tokens

    def _oriented_reserves_sync(self, pair_id: str, token_in: str) -> tuple[int, int]:
        token0, token1 = self._pair_tokens_sync(pair_id)
        token_in_norm = normalize_address(token_in)
        if token_in_norm not in (token0, token1):
            raise ValueError(f"Token {token_in} not in pair {pair_id}")
        reserve0, reserve1, _ = self._pair_contract(pair_id).functions.getReserves().call()
        if token_in_norm == token0:
            return int(reserve0), int(reserve1)
        return int(reserve1), int(reserve0)

    async def find_pair(self, token_a: str, token_b: str) -> str | None:
        pair = await self._run(self._get_pair_sync, token_a, token_b)
        logger.debug("pair_lookup", token_a=token_a, token_b=token_b, pair=pair)
        return pair

    async def get_oriented_reserves(self, pair_id: str | None, token_in: str) -> tuple[int, int]:
        if is_zero_address(pair_id):
            raise PairNotFoundError(token_in, pair_id)
        pair_norm = normalize_address(pair_id)  # type: ignore[arg-type]
        return await self._run(self._oriented_reserves_sync, pair_norm, token_in)


__all__ = [
    "FACTORY_ABI",
    "PAIR_ABI",
    "Web3PairReserveProvider",
]
