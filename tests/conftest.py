"""Pytest configuration and fixtures."""

import asyncio
from collections.abc import Callable

import pytest

from earn_builder.config import ChainConfig
from earn_builder.pairs.provider import InMemoryPairReserveProvider
from earn_builder.resolver import EarnConfigResolver
from earn_builder.routing.types import PoolTokens
from tests.helpers import make_chain, make_pool


@pytest.fixture
def pool() -> PoolTokens:
    """USDT/BUSD pool (token_a=USDT, token_b=BUSD)."""
    return make_pool()


@pytest.fixture
def chain() -> ChainConfig:
    """BSC-like chain with WBNB as the only intermediary."""
    return make_chain()


@pytest.fixture
def make_resolver(
    pool: PoolTokens, chain: ChainConfig
) -> Callable[[InMemoryPairReserveProvider], EarnConfigResolver]:
    """Build a resolver for the default pool and chain around a provider."""

    def _make(provider: InMemoryPairReserveProvider) -> EarnConfigResolver:
        return EarnConfigResolver(provider, pool, chain)

    return _make


def run(coro):  # type: ignore[no-untyped-def]
    """Run a coroutine to completion in a fresh event loop."""
    return asyncio.run(coro)
