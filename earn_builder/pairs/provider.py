"""Pair reserve providers for route resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from earn_builder.errors import PairNotFoundError
from earn_builder.models.types import is_zero_address, normalize_address, sort_tokens


class PairReserveProvider(Protocol):
    """Protocol for pair lookup and reserve reading.

    Implementations must be safe to call concurrently from multiple tasks.
    This allows swapping between the web3-backed provider and an in-memory
    snapshot for testing.
    """

    async def find_pair(self, token_a: str, token_b: str) -> str | None:
        """Look up the pair for two tokens.

        Returns:
            Pair address, or None if the pair does not exist
        """
        ...

    async def get_oriented_reserves(self, pair_id: str | None, token_in: str) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out).

        Raises:
            PairNotFoundError: If pair_id is None or the zero address
        """
        ...


@dataclass(frozen=True)
class PairSnapshot:
    """A pair as stored on-chain: tokens in canonical order with their reserves."""

    address: str
    token0: str
    token1: str
    reserve0: int
    reserve1: int

    @classmethod
    def create(
        cls,
        address: str,
        token_a: str,
        token_b: str,
        reserve_a: int,
        reserve_b: int,
    ) -> PairSnapshot:
        """Create a snapshot from reserves given in (token_a, token_b) order."""
        token_a = normalize_address(token_a)
        token_b = normalize_address(token_b)
        token0, _ = sort_tokens(token_a, token_b)
        if token0 == token_a:
            return cls(normalize_address(address), token_a, token_b, reserve_a, reserve_b)
        return cls(normalize_address(address), token_b, token_a, reserve_b, reserve_a)

    def oriented(self, token_in: str) -> tuple[int, int]:
        """Get reserves ordered as (reserve_in, reserve_out)."""
        token_in_norm = normalize_address(token_in)
        if token_in_norm == self.token0:
            return self.reserve0, self.reserve1
        elif token_in_norm == self.token1:
            return self.reserve1, self.reserve0
        else:
            raise ValueError(f"Token {token_in} not in pair {self.address}")


class InMemoryPairReserveProvider:
    """Provider backed by a fixed reserve snapshot.

    Used for tests and offline resolution. Tracks calls for assertions.
    """

    def __init__(self, pairs: list[PairSnapshot] | None = None) -> None:
        self._by_tokens: dict[frozenset[str], PairSnapshot] = {}
        self._by_address: dict[str, PairSnapshot] = {}
        self.calls: list[tuple[str, ...]] = []
        for pair in pairs or []:
            self.add_pair(pair)

    def add_pair(self, pair: PairSnapshot) -> None:
        self._by_tokens[frozenset((pair.token0, pair.token1))] = pair
        self._by_address[pair.address] = pair

    async def find_pair(self, token_a: str, token_b: str) -> str | None:
        self.calls.append(("find_pair", token_a, token_b))
        key = frozenset((normalize_address(token_a), normalize_address(token_b)))
        pair = self._by_tokens.get(key)
        return pair.address if pair is not None else None

    async def get_oriented_reserves(self, pair_id: str | None, token_in: str) -> tuple[int, int]:
        self.calls.append(("get_oriented_reserves", str(pair_id), token_in))
        if is_zero_address(pair_id):
            raise PairNotFoundError(token_in, pair_id)
        pair = self._by_address.get(normalize_address(pair_id))  # type: ignore[arg-type]
        if pair is None:
            raise PairNotFoundError(token_in, pair_id)
        return pair.oriented(token_in)


__all__ = [
    "InMemoryPairReserveProvider",
    "PairReserveProvider",
    "PairSnapshot",
]
