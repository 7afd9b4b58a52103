"""Type definitions for routing module."""

from __future__ import annotations

from dataclasses import dataclass

from earn_builder.models.types import normalize_address, sort_tokens


@dataclass(frozen=True)
class PoolTokens:
    """The two tokens backing the farm's liquidity pool."""

    token_a: str
    token_b: str

    def __post_init__(self) -> None:
        # Raises for identical tokens
        sort_tokens(self.token_a, self.token_b)

    def contains(self, token: str) -> bool:
        """Check if token is one of the pool's tokens."""
        norm = normalize_address(token)
        return norm in (normalize_address(self.token_a), normalize_address(self.token_b))

    def other(self, token: str) -> str:
        """Get the pool token that is not `token`.

        Raises:
            ValueError: If token is not in the pool
        """
        norm = normalize_address(token)
        if norm == normalize_address(self.token_a):
            return self.token_b
        if norm == normalize_address(self.token_b):
            return self.token_a
        raise ValueError(f"Token {token} not in pool")

    def as_tuple(self) -> tuple[str, str]:
        return (self.token_a, self.token_b)


@dataclass(frozen=True)
class PairReserves:
    """Reserves of one pair, oriented relative to `token_in`."""

    pair_id: str
    token_in: str
    token_out: str
    reserve_in: int
    reserve_out: int

    def __post_init__(self) -> None:
        if self.reserve_in < 0 or self.reserve_out < 0:
            raise ValueError(
                f"Reserves cannot be negative: {self.reserve_in}, {self.reserve_out}"
            )


@dataclass(frozen=True)
class ZeroHopRoute:
    """The reward token is already a pool token; no swap is needed."""

    reward_token: str

    @property
    def hops(self) -> int:
        return 0


@dataclass(frozen=True)
class SwapPath:
    """A swap route from the reward token through one or more pairs.

    `path` lists the tokens visited (starting at the reward token) and
    `pairs_path` the pair used for each hop.
    """

    path: tuple[str, ...]
    pairs_path: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.path) < 2:
            raise ValueError(f"A swap path needs at least two tokens, got {len(self.path)}")
        if len(self.pairs_path) != len(self.path) - 1:
            raise ValueError(
                f"pairs_path length {len(self.pairs_path)} does not match "
                f"{len(self.path) - 1} hops"
            )

    @property
    def hops(self) -> int:
        return len(self.pairs_path)

    @property
    def reward_token(self) -> str:
        return self.path[0]

    @property
    def terminal_token(self) -> str:
        """The pool token the final hop lands on."""
        return self.path[-1]


Route = ZeroHopRoute | SwapPath


@dataclass(frozen=True)
class NormalizedRoute:
    """A swap path with its liquidity-depth score."""

    route: SwapPath
    normalized_depth: int


__all__ = [
    "NormalizedRoute",
    "PairReserves",
    "PoolTokens",
    "Route",
    "SwapPath",
    "ZeroHopRoute",
]
