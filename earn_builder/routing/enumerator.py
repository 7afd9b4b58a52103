"""Candidate route enumeration from a reward token to the pool tokens.

Candidates are listed in a fixed order that the selector relies on for
tie-breaking: direct routes first, then routes through each intermediary;
within a tier the pool's token_a comes before token_b.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import structlog

from earn_builder.models.types import normalize_address
from earn_builder.routing.types import PairReserves, PoolTokens, SwapPath, ZeroHopRoute

logger = structlog.get_logger()

Hop = tuple[str, str]


@dataclass(frozen=True)
class Candidate:
    """A candidate swap path together with the reserves of every hop."""

    route: SwapPath
    reserves: tuple[PairReserves, ...]


def zero_hop_route(reward_token: str, pool: PoolTokens) -> ZeroHopRoute | None:
    """Return a ZeroHopRoute if the reward token is already a pool token."""
    if pool.contains(reward_token):
        return ZeroHopRoute(reward_token=normalize_address(reward_token))
    return None


def enumerate_token_paths(
    reward_token: str,
    pool: PoolTokens,
    intermediaries: Sequence[str],
) -> list[tuple[str, ...]]:
    """List candidate token paths in enumeration order.

    One-hop paths are skipped when the intermediary is the reward token
    itself or one of the pool tokens (the direct path already covers it).

    Args:
        reward_token: Token to convert (must not be a pool token)
        pool: The pool's two tokens
        intermediaries: Routing currencies, in priority order

    Returns:
        Token paths, each starting at the reward token
    """
    reward = normalize_address(reward_token)
    bases = [normalize_address(pool.token_a), normalize_address(pool.token_b)]
    if reward in bases:
        raise ValueError(f"Reward token {reward_token} is a pool token; no swap path needed")

    paths: list[tuple[str, ...]] = [(reward, base) for base in bases]
    seen: set[str] = set()
    for intermediary in intermediaries:
        mid = normalize_address(intermediary)
        if mid == reward or mid in bases or mid in seen:
            continue
        seen.add(mid)
        paths.extend((reward, mid, base) for base in bases)
    return paths


def required_hops(paths: Sequence[tuple[str, ...]]) -> list[Hop]:
    """Distinct (token_in, token_out) hops needed by the given paths, in first-use order."""
    hops: list[Hop] = []
    seen: set[Hop] = set()
    for path in paths:
        for hop in zip(path, path[1:], strict=False):
            if hop not in seen:
                seen.add(hop)
                hops.append(hop)
    return hops


def build_candidates(
    paths: Sequence[tuple[str, ...]],
    hop_reserves: Mapping[Hop, PairReserves | None],
) -> list[Candidate]:
    """Materialize candidates whose pairs all exist, preserving path order.

    Args:
        paths: Token paths from enumerate_token_paths
        hop_reserves: Oriented reserves per hop; None marks a missing pair

    Returns:
        Candidates for paths where every hop has reserves
    """
    candidates: list[Candidate] = []
    for path in paths:
        hops = list(zip(path, path[1:], strict=False))
        reserves = [hop_reserves.get(hop) for hop in hops]
        if any(r is None for r in reserves):
            missing = [hop for hop, r in zip(hops, reserves, strict=True) if r is None]
            logger.debug("route_candidate_excluded", path=list(path), reason="pair_not_found", missing=missing)
            continue
        present = tuple(r for r in reserves if r is not None)
        candidates.append(
            Candidate(
                route=SwapPath(path=tuple(path), pairs_path=tuple(r.pair_id for r in present)),
                reserves=present,
            )
        )
    return candidates


__all__ = [
    "Candidate",
    "build_candidates",
    "enumerate_token_paths",
    "required_hops",
    "zero_hop_route",
]
