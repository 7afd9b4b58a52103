"""MinichefV2 farm pool reader."""

from __future__ import annotations

from dataclasses import dataclass

import structlog
from web3 import Web3

from earn_builder.errors import FarmReadError
from earn_builder.models.types import is_zero_address, normalize_address
from earn_builder.pairs.web3_provider import PAIR_ABI
from earn_builder.routing.types import PoolTokens

logger = structlog.get_logger()

MINICHEF_V2_ABI = [
    {
        "name": "lpToken",
        "type": "function",
        "stateMutability": "view",
        "inputs": [{"name": "pid", "type": "uint256"}],
        "outputs": [{"name": "", "type": "address"}],
    },
]

ERC20_ABI = [
    {
        "name": "symbol",
        "type": "function",
        "stateMutability": "view",
        "inputs": [],
        "outputs": [{"name": "", "type": "string"}],
    },
]


@dataclass(frozen=True)
class FarmPool:
    """A MinichefV2 pool and the UniswapV2 pair it stakes."""

    farm_address: str
    pid: int
    asset: str
    factory: str
    token0: str
    token1: str
    symbol0: str
    symbol1: str

    @property
    def tokens(self) -> PoolTokens:
        return PoolTokens(self.token0, self.token1)


class MinichefV2Reader:
    """Reads farm pool metadata from a MinichefV2 contract."""

    def __init__(self, w3: Web3) -> None:
        self.w3 = w3

    def _symbol(self, token: str) -> str:
        contract = self.w3.eth.contract(address=Web3.to_checksum_address(token), abi=ERC20_ABI)
        return str(contract.functions.symbol().call())

    def read_pool(self, farm_address: str, pid: int) -> FarmPool:
        """Read the LP pair staked by `pid` and its constituent tokens.

        Raises:
            FarmReadError: If the farm reports no LP token for pid
        """
        minichef = self.w3.eth.contract(
            address=Web3.to_checksum_address(farm_address),
            abi=MINICHEF_V2_ABI,
        )
        asset = minichef.functions.lpToken(pid).call()
        if is_zero_address(asset):
            raise FarmReadError(f"Farm {farm_address} has no LP token for pid {pid}")

        pair = self.w3.eth.contract(address=Web3.to_checksum_address(asset), abi=PAIR_ABI)
        factory = pair.functions.factory().call()
        token0 = pair.functions.token0().call()
        token1 = pair.functions.token1().call()

        pool = FarmPool(
            farm_address=normalize_address(farm_address),
            pid=pid,
            asset=normalize_address(asset),
            factory=normalize_address(factory),
            token0=normalize_address(token0),
            token1=normalize_address(token1),
            symbol0=self._symbol(token0),
            symbol1=self._symbol(token1),
        )
        logger.info(
            "farm_pool_read",
            farm=pool.farm_address,
            pid=pid,
            asset=pool.asset,
            token0=pool.token0,
            token1=pool.token1,
            symbol0=pool.symbol0,
            symbol1=pool.symbol1,
        )
        return pool


__all__ = ["ERC20_ABI", "MINICHEF_V2_ABI", "FarmPool", "MinichefV2Reader"]
