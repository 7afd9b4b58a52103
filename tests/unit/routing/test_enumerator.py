"""Unit tests for candidate route enumeration."""

import pytest

from earn_builder.routing.enumerator import (
    build_candidates,
    enumerate_token_paths,
    required_hops,
    zero_hop_route,
)
from earn_builder.routing.types import PairReserves, ZeroHopRoute
from tests.helpers import BUSD, CAKE, ETH, USDT, WBNB, make_pool, pair_address


def _reserves(token_in: str, token_out: str, reserve_in: int = 100, reserve_out: int = 100) -> PairReserves:
    return PairReserves(
        pair_id=pair_address(token_in, token_out),
        token_in=token_in,
        token_out=token_out,
        reserve_in=reserve_in,
        reserve_out=reserve_out,
    )


class TestZeroHop:
    """Tests for the reward-is-a-pool-token shortcut."""

    def test_reward_is_token_a(self):
        """Reward equal to token_a yields a zero-hop route."""
        route = zero_hop_route(USDT, make_pool())
        assert route == ZeroHopRoute(reward_token=USDT)
        assert route.hops == 0

    def test_reward_is_token_b_mixed_case(self):
        """Address comparison is case-insensitive."""
        route = zero_hop_route(BUSD.upper().replace("0X", "0x"), make_pool())
        assert route == ZeroHopRoute(reward_token=BUSD)

    def test_reward_not_in_pool(self):
        """A foreign reward token needs a swap."""
        assert zero_hop_route(CAKE, make_pool()) is None


class TestEnumerateTokenPaths:
    """Tests for candidate path order."""

    def test_fixed_order_with_one_intermediary(self):
        """Direct routes come first, token_a before token_b in each tier."""
        paths = enumerate_token_paths(CAKE, make_pool(), [WBNB])
        assert paths == [
            (CAKE, USDT),
            (CAKE, BUSD),
            (CAKE, WBNB, USDT),
            (CAKE, WBNB, BUSD),
        ]

    def test_reward_is_intermediary(self):
        """No one-hop candidates when the reward is the intermediary."""
        paths = enumerate_token_paths(WBNB, make_pool(), [WBNB])
        assert paths == [(WBNB, USDT), (WBNB, BUSD)]

    def test_intermediary_is_pool_token(self):
        """A pool token as intermediary adds nothing beyond the direct routes."""
        paths = enumerate_token_paths(CAKE, make_pool(WBNB, BUSD), [WBNB])
        assert paths == [(CAKE, WBNB), (CAKE, BUSD)]

    def test_multiple_intermediaries_keep_priority(self):
        """Each intermediary adds a tier, in the order given."""
        paths = enumerate_token_paths(CAKE, make_pool(), [WBNB, ETH])
        assert paths[4:] == [(CAKE, ETH, USDT), (CAKE, ETH, BUSD)]
        assert len(paths) == 6

    def test_duplicate_intermediaries_ignored(self):
        """Listing an intermediary twice does not duplicate candidates."""
        paths = enumerate_token_paths(CAKE, make_pool(), [WBNB, WBNB.upper().replace("0X", "0x")])
        assert len(paths) == 4

    def test_reward_in_pool_rejected(self):
        """Enumeration is only for rewards that need a swap."""
        with pytest.raises(ValueError, match="is a pool token"):
            enumerate_token_paths(USDT, make_pool(), [WBNB])


class TestRequiredHops:
    """Tests for hop de-duplication."""

    def test_shared_first_hop_queried_once(self):
        """reward->intermediary is needed by both one-hop paths but listed once."""
        paths = enumerate_token_paths(CAKE, make_pool(), [WBNB])
        hops = required_hops(paths)
        assert hops == [
            (CAKE, USDT),
            (CAKE, BUSD),
            (CAKE, WBNB),
            (WBNB, USDT),
            (WBNB, BUSD),
        ]


class TestBuildCandidates:
    """Tests for dropping candidates with missing pairs."""

    def test_all_pairs_present(self):
        """Every path becomes a candidate with matching pairs."""
        paths = enumerate_token_paths(CAKE, make_pool(), [WBNB])
        hop_reserves = {hop: _reserves(*hop) for hop in required_hops(paths)}

        candidates = build_candidates(paths, hop_reserves)

        assert [c.route.path for c in candidates] == paths
        one_hop = candidates[2].route
        assert one_hop.pairs_path == (pair_address(CAKE, WBNB), pair_address(WBNB, USDT))
        assert len(one_hop.pairs_path) == len(one_hop.path) - 1

    def test_missing_pair_drops_only_its_candidates(self):
        """A missing intermediary->token_a pair removes just that one-hop path."""
        paths = enumerate_token_paths(CAKE, make_pool(), [WBNB])
        hop_reserves = {hop: _reserves(*hop, reserve_in=10**30) for hop in required_hops(paths)}
        hop_reserves[(WBNB, USDT)] = None

        candidates = build_candidates(paths, hop_reserves)

        assert [c.route.path for c in candidates] == [
            (CAKE, USDT),
            (CAKE, BUSD),
            (CAKE, WBNB, BUSD),
        ]

    def test_missing_first_hop_drops_all_one_hop_paths(self):
        """Without reward->intermediary, only direct routes remain."""
        paths = enumerate_token_paths(CAKE, make_pool(), [WBNB])
        hop_reserves = {hop: _reserves(*hop) for hop in required_hops(paths)}
        hop_reserves[(CAKE, WBNB)] = None

        candidates = build_candidates(paths, hop_reserves)

        assert all(c.route.hops == 1 for c in candidates)
        assert len(candidates) == 2

    def test_no_pairs(self):
        """No existing pairs means no candidates."""
        paths = enumerate_token_paths(CAKE, make_pool(), [WBNB])
        assert build_candidates(paths, {}) == []
