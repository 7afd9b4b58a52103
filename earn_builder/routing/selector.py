"""Best-route selection."""

from __future__ import annotations

from collections.abc import Sequence

from earn_builder.errors import NoRouteFoundError
from earn_builder.routing.types import NormalizedRoute, PoolTokens


def select_best_route(
    routes: Sequence[NormalizedRoute],
    reward_token: str,
    pool: PoolTokens,
) -> NormalizedRoute:
    """Pick the deepest route, keeping the earliest one on ties.

    Raises:
        NoRouteFoundError: If routes is empty
    """
    best: NormalizedRoute | None = None
    for route in routes:
        if best is None or route.normalized_depth > best.normalized_depth:
            best = route
    if best is None:
        raise NoRouteFoundError(reward_token, pool.as_tuple())
    return best


__all__ = ["select_best_route"]
