"""Earn config assembly from a selected route."""

from earn_builder.constants import DEFAULT_FEE_FACTOR
from earn_builder.models.earn_config import (
    EarnConfig,
    StratConfig,
    StratInfo,
    SwapRouteConfig,
    ZapLiquidityConfig,
)
from earn_builder.models.types import normalize_address
from earn_builder.routing.types import PoolTokens, Route, SwapPath


def build_earn_config(
    reward_token: str,
    route: Route,
    pool: PoolTokens,
    fee_factor: int = DEFAULT_FEE_FACTOR,
) -> EarnConfig:
    """Build the EarnConfig for a reward token.

    For a zero-hop route the reward token is zapped directly against the
    other pool token. For a swap path every hop gets `fee_factor`, and the
    zap goes from the token the path lands on to the other pool token.

    Args:
        reward_token: Reward token the config is for
        route: Selected route (ZeroHopRoute or SwapPath)
        pool: The pool's two tokens
        fee_factor: Fee complement applied per hop and to the zap

    Returns:
        EarnConfig ready for serialization

    Raises:
        ValueError: If the route does not start at the reward token or does
            not end on a pool token
    """
    reward = normalize_address(reward_token)

    if isinstance(route, SwapPath):
        if route.reward_token != reward:
            raise ValueError(f"Route starts at {route.reward_token}, expected {reward}")
        zap_in = route.terminal_token
        swap_route = SwapRouteConfig(
            fee_factors=[fee_factor] * route.hops,
            pairs_path=list(route.pairs_path),
            tokens_path=list(route.path),
        )
    else:
        zap_in = reward
        swap_route = SwapRouteConfig(fee_factors=[], pairs_path=[], tokens_path=[])

    return EarnConfig(
        reward_token=reward,
        swap_route=swap_route,
        zap_liquidity_config=ZapLiquidityConfig(
            fee_factor=fee_factor,
            lp_subtoken_in=zap_in,
            lp_subtoken_out=pool.other(zap_in),
        ),
    )


def build_strat_config(
    asset: str,
    pid: int,
    farm_contract_address: str,
    earn_configs: list[EarnConfig],
) -> StratConfig:
    """Wrap per-reward earn configs into the strategy config document."""
    return StratConfig(
        strat=StratInfo(asset=asset, pid=pid, farm_contract_address=farm_contract_address),
        earn_configs=earn_configs,
    )


__all__ = ["build_earn_config", "build_strat_config"]
