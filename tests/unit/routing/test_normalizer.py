"""Unit tests for liquidity-depth normalization."""

import pytest

from earn_builder.routing.enumerator import Candidate
from earn_builder.routing.normalizer import normalize_candidates, normalized_depth
from earn_builder.routing.types import PairReserves, SwapPath
from earn_builder.safe_int import ArithmeticOverflowError
from tests.helpers import CAKE, USDT, WBNB, pair_address


def _hop(token_in: str, token_out: str, reserve_in: int, reserve_out: int) -> PairReserves:
    return PairReserves(
        pair_id=pair_address(token_in, token_out),
        token_in=token_in,
        token_out=token_out,
        reserve_in=reserve_in,
        reserve_out=reserve_out,
    )


def _candidate(*hops: PairReserves) -> Candidate:
    path = (hops[0].token_in, *(h.token_out for h in hops))
    return Candidate(
        route=SwapPath(path=path, pairs_path=tuple(h.pair_id for h in hops)),
        reserves=hops,
    )


class TestNormalizedDepth:
    """Tests for the depth formula."""

    def test_direct_route_is_reserve_in(self):
        """A direct route scores the reward-token reserve of its pair."""
        assert normalized_depth([_hop(CAKE, USDT, 1000, 7)]) == 1000

    def test_one_hop_formula(self):
        """depth = rI * r'I // (r'I + rO)."""
        first = _hop(CAKE, WBNB, 10_000, 50)
        second = _hop(WBNB, USDT, 1000, 300_000)
        # 10_000 * 1000 // 1050 = 9523 (truncated)
        assert normalized_depth([first, second]) == 9523

    def test_one_hop_ignores_final_output_reserve(self):
        """r'O does not enter the score."""
        first = _hop(CAKE, WBNB, 10_000, 50)
        assert normalized_depth([first, _hop(WBNB, USDT, 1000, 1)]) == normalized_depth(
            [first, _hop(WBNB, USDT, 1000, 10**24)]
        )

    def test_large_reserves_do_not_wrap(self):
        """Products far beyond 64 bits are exact."""
        first = _hop(CAKE, WBNB, 2**111, 2**100)
        second = _hop(WBNB, USDT, 2**110, 2**111)
        expected = (2**111 * 2**110) // (2**110 + 2**100)
        assert normalized_depth([first, second]) == expected

    def test_zero_divisor_returns_none(self):
        """r'I + rO == 0 excludes the route instead of raising."""
        first = _hop(CAKE, WBNB, 10_000, 0)
        second = _hop(WBNB, USDT, 0, 5)
        assert normalized_depth([first, second]) is None

    def test_overflow_raises(self):
        """A score beyond uint256 fails loudly."""
        with pytest.raises(ArithmeticOverflowError, match="exceeds uint256"):
            normalized_depth([_hop(CAKE, USDT, 2**256, 1)])

    def test_unsupported_length(self):
        """Only direct and one-hop routes are scored."""
        with pytest.raises(ValueError, match="Unsupported route length"):
            normalized_depth([])


class TestNormalizeCandidates:
    """Tests for scoring a candidate list."""

    def test_preserves_order_and_drops_zero_divisor(self):
        """Zero-divisor candidates are removed; the rest keep their order."""
        direct = _candidate(_hop(CAKE, USDT, 500, 1))
        broken = _candidate(_hop(CAKE, WBNB, 10_000, 0), _hop(WBNB, USDT, 0, 5))
        one_hop = _candidate(_hop(CAKE, WBNB, 10_000, 50), _hop(WBNB, USDT, 1000, 300_000))

        normalized = normalize_candidates([direct, broken, one_hop])

        assert [n.route for n in normalized] == [direct.route, one_hop.route]
        assert [n.normalized_depth for n in normalized] == [500, 9523]
