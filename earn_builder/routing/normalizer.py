"""Liquidity-depth normalization for candidate routes.

A direct route scores the reward-token reserve of its single pair.
A route through an intermediary discounts the first hop's reward reserve by
how much of the intermediary's output the second pair can absorb:

    depth = rI * r'I // (r'I + rO)

where (rI, rO) are the reward->intermediary reserves and (r'I, r'O) the
intermediary->base reserves.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog

from earn_builder.routing.enumerator import Candidate
from earn_builder.routing.types import NormalizedRoute, PairReserves
from earn_builder.safe_int import S

logger = structlog.get_logger()


def normalized_depth(reserves: Sequence[PairReserves]) -> int | None:
    """Compute the normalized depth of a route from its per-hop reserves.

    Args:
        reserves: Oriented reserves of each hop, in path order

    Returns:
        Depth score, or None if the one-hop divisor is zero

    Raises:
        ValueError: If the route has no hops or more than two
        ArithmeticOverflowError: If the score exceeds uint256
    """
    if len(reserves) == 1:
        return S(reserves[0].reserve_in).to_uint256()

    if len(reserves) == 2:
        first, second = reserves
        depth = (S(first.reserve_in) * S(second.reserve_in)).checked_div(
            S(second.reserve_in) + S(first.reserve_out)
        )
        if depth is None:
            return None
        return depth.to_uint256()

    raise ValueError(f"Unsupported route length: {len(reserves)} hops")


def normalize_candidates(candidates: Sequence[Candidate]) -> list[NormalizedRoute]:
    """Score candidates, dropping those with a zero divisor. Order is preserved."""
    normalized: list[NormalizedRoute] = []
    for candidate in candidates:
        depth = normalized_depth(candidate.reserves)
        if depth is None:
            logger.debug(
                "route_candidate_excluded",
                path=list(candidate.route.path),
                reason="zero_divisor",
            )
            continue
        normalized.append(NormalizedRoute(route=candidate.route, normalized_depth=depth))
    return normalized


__all__ = ["normalize_candidates", "normalized_depth"]
