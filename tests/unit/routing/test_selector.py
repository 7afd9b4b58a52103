"""Unit tests for best-route selection."""

import pytest

from earn_builder.errors import NoRouteFoundError
from earn_builder.routing.selector import select_best_route
from earn_builder.routing.types import NormalizedRoute, SwapPath
from tests.helpers import BUSD, CAKE, USDT, WBNB, make_pool, pair_address


def _direct(base: str, depth: int) -> NormalizedRoute:
    return NormalizedRoute(
        route=SwapPath(path=(CAKE, base), pairs_path=(pair_address(CAKE, base),)),
        normalized_depth=depth,
    )


def _via_wbnb(base: str, depth: int) -> NormalizedRoute:
    return NormalizedRoute(
        route=SwapPath(
            path=(CAKE, WBNB, base),
            pairs_path=(pair_address(CAKE, WBNB), pair_address(WBNB, base)),
        ),
        normalized_depth=depth,
    )


class TestSelectBestRoute:
    """Tests for the strictly-greater fold."""

    def test_picks_deepest(self):
        """The highest depth wins regardless of position."""
        routes = [_direct(USDT, 10), _direct(BUSD, 20), _via_wbnb(USDT, 30), _via_wbnb(BUSD, 5)]
        assert select_best_route(routes, CAKE, make_pool()) is routes[2]

    def test_tie_keeps_earliest(self):
        """Equal depths keep the first enumerated route."""
        routes = [_direct(USDT, 100), _direct(BUSD, 100)]
        assert select_best_route(routes, CAKE, make_pool()).route.terminal_token == USDT

    def test_tie_prefers_direct_over_one_hop(self):
        """A one-hop route must be strictly deeper to replace a direct one."""
        routes = [_direct(BUSD, 600), _via_wbnb(USDT, 600)]
        assert select_best_route(routes, CAKE, make_pool()).route.hops == 1

    def test_single_route(self):
        assert select_best_route([_via_wbnb(BUSD, 0)], CAKE, make_pool()).normalized_depth == 0

    def test_empty_raises(self):
        """No candidates is a NoRouteFoundError naming the reward token."""
        with pytest.raises(NoRouteFoundError, match="No route found") as exc_info:
            select_best_route([], CAKE, make_pool())
        assert exc_info.value.reward_token == CAKE
        assert exc_info.value.pool_tokens == (USDT, BUSD)
