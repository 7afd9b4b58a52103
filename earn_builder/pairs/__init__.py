"""Pair lookup and reserve reading."""

from earn_builder.pairs.provider import (
    InMemoryPairReserveProvider,
    PairReserveProvider,
    PairSnapshot,
)
from earn_builder.pairs.web3_provider import Web3PairReserveProvider

__all__ = [
    "InMemoryPairReserveProvider",
    "PairReserveProvider",
    "PairSnapshot",
    "Web3PairReserveProvider",
]
