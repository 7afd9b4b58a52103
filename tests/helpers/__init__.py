"""Test helpers module for shared test utilities.

- constants: Token and contract addresses
- factories: Pair, provider, pool and chain factories
- mocks: MagicMock-based web3 for contract readers
"""

from tests.helpers.constants import (
    BUSD,
    CAKE,
    ETH,
    FEE_FACTOR,
    LP_TOKEN,
    MINICHEF,
    PCS_FACTORY,
    USDT,
    WBNB,
    ZERO,
)
from tests.helpers.factories import make_chain, make_pair, make_pool, make_provider, pair_address
from tests.helpers.mocks import mock_web3

__all__ = [
    # Constants
    "BUSD",
    "CAKE",
    "ETH",
    "FEE_FACTOR",
    "LP_TOKEN",
    "MINICHEF",
    "PCS_FACTORY",
    "USDT",
    "WBNB",
    "ZERO",
    # Factories
    "make_chain",
    "make_pair",
    "make_pool",
    "make_provider",
    "pair_address",
    # Mocks
    "mock_web3",
]
