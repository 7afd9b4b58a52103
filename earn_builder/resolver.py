"""Reward token route resolution.

Ties the routing pieces together for one pool:

    enumerate -> fetch reserves (concurrent) -> normalize -> select -> build

All pair lookups for a reward token run concurrently in one task group,
which is also the join barrier: scoring starts only once every hop has been
read. A missing pair only removes the candidates that need it; any other
provider error fails that reward token. Reward tokens are resolved
independently of each other.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass

import structlog

from earn_builder.builder import build_earn_config
from earn_builder.config import ChainConfig
from earn_builder.errors import PairNotFoundError
from earn_builder.models.earn_config import EarnConfig
from earn_builder.models.types import normalize_address
from earn_builder.pairs.provider import PairReserveProvider
from earn_builder.routing.enumerator import (
    Hop,
    build_candidates,
    enumerate_token_paths,
    required_hops,
    zero_hop_route,
)
from earn_builder.routing.normalizer import normalize_candidates
from earn_builder.routing.selector import select_best_route
from earn_builder.routing.types import NormalizedRoute, PairReserves, PoolTokens, ZeroHopRoute

logger = structlog.get_logger()


@dataclass(frozen=True)
class EarnConfigResult:
    """Outcome of resolving one reward token.

    Exactly one of earn_config and error is set.
    """

    reward_token: str
    earn_config: EarnConfig | None = None
    error: Exception | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None


class EarnConfigResolver:
    """Resolves earn configs for reward tokens of a single pool.

    Args:
        provider: Pair lookup and reserve source
        pool: The pool's two tokens
        chain: Chain settings (intermediaries and fee factor)
    """

    def __init__(self, provider: PairReserveProvider, pool: PoolTokens, chain: ChainConfig) -> None:
        self.provider = provider
        self.pool = pool
        self.chain = chain

    async def _fetch_hop(self, hop: Hop) -> PairReserves | None:
        token_in, token_out = hop
        pair_id = await self.provider.find_pair(token_in, token_out)
        if pair_id is None:
            return None
        try:
            reserve_in, reserve_out = await self.provider.get_oriented_reserves(pair_id, token_in)
        except PairNotFoundError:
            return None
        return PairReserves(
            pair_id=normalize_address(pair_id),
            token_in=token_in,
            token_out=token_out,
            reserve_in=reserve_in,
            reserve_out=reserve_out,
        )

    async def fetch_hop_reserves(self, hops: Sequence[Hop]) -> dict[Hop, PairReserves | None]:
        """Read every hop concurrently and wait for all of them.

        Raises:
            Exception: The first provider error, after cancelling the other reads
        """
        try:
            async with asyncio.TaskGroup() as tg:
                tasks = {hop: tg.create_task(self._fetch_hop(hop)) for hop in hops}
        except ExceptionGroup as eg:
            raise eg.exceptions[0] from eg
        return {hop: task.result() for hop, task in tasks.items()}

    async def resolve_route(self, reward_token: str) -> ZeroHopRoute | NormalizedRoute:
        """Find the best route for a reward token.

        Raises:
            NoRouteFoundError: If no candidate route exists
        """
        zero_hop = zero_hop_route(reward_token, self.pool)
        if zero_hop is not None:
            logger.info("route_zero_hop", reward_token=zero_hop.reward_token)
            return zero_hop

        paths = enumerate_token_paths(reward_token, self.pool, self.chain.intermediaries)
        hop_reserves = await self.fetch_hop_reserves(required_hops(paths))

        candidates = build_candidates(paths, hop_reserves)
        normalized = normalize_candidates(candidates)
        logger.debug(
            "route_candidates",
            reward_token=reward_token,
            enumerated=len(paths),
            viable=len(normalized),
            depths=[(list(n.route.path), n.normalized_depth) for n in normalized],
        )

        best = select_best_route(normalized, normalize_address(reward_token), self.pool)
        logger.info(
            "route_selected",
            reward_token=reward_token,
            path=list(best.route.path),
            pairs=list(best.route.pairs_path),
            normalized_depth=best.normalized_depth,
        )
        return best

    async def resolve(self, reward_token: str) -> EarnConfig:
        """Resolve the EarnConfig for one reward token."""
        selected = await self.resolve_route(reward_token)
        route = selected if isinstance(selected, ZeroHopRoute) else selected.route
        return build_earn_config(reward_token, route, self.pool, fee_factor=self.chain.fee_factor)

    async def _resolve_result(self, reward_token: str) -> EarnConfigResult:
        try:
            config = await self.resolve(reward_token)
        except Exception as e:
            logger.error(
                "reward_resolution_failed",
                reward_token=reward_token,
                error_type=type(e).__name__,
                error=str(e),
            )
            return EarnConfigResult(reward_token=reward_token, error=e)
        return EarnConfigResult(reward_token=reward_token, earn_config=config)

    async def resolve_many(self, reward_tokens: Sequence[str]) -> list[EarnConfigResult]:
        """Resolve several reward tokens concurrently.

        A failure is reported in that reward's result and does not affect
        the others. Results follow the input order.
        """
        return list(await asyncio.gather(*(self._resolve_result(r) for r in reward_tokens)))


__all__ = ["EarnConfigResolver", "EarnConfigResult"]
