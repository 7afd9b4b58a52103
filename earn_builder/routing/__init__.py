"""Reward token routing: enumeration, depth normalization and selection."""

from earn_builder.routing.enumerator import (
    Candidate,
    build_candidates,
    enumerate_token_paths,
    required_hops,
    zero_hop_route,
)
from earn_builder.routing.normalizer import normalize_candidates, normalized_depth
from earn_builder.routing.selector import select_best_route
from earn_builder.routing.types import (
    NormalizedRoute,
    PairReserves,
    PoolTokens,
    Route,
    SwapPath,
    ZeroHopRoute,
)

__all__ = [
    # Types
    "NormalizedRoute",
    "PairReserves",
    "PoolTokens",
    "Route",
    "SwapPath",
    "ZeroHopRoute",
    # Enumeration
    "Candidate",
    "build_candidates",
    "enumerate_token_paths",
    "required_hops",
    "zero_hop_route",
    # Scoring and selection
    "normalize_candidates",
    "normalized_depth",
    "select_best_route",
]
