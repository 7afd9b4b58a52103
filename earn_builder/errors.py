"""Error classes for earn config building.

Arithmetic errors live in earn_builder.safe_int.
"""


class EarnBuilderError(Exception):
    """Base error for earn config building."""

    pass


class PairNotFoundError(EarnBuilderError):
    """A required AMM pair does not exist on-chain."""

    def __init__(self, token_in: str, pair_id: str | None = None) -> None:
        self.token_in = token_in
        self.pair_id = pair_id
        super().__init__(f"Pair not found for token {token_in} (pair id: {pair_id})")


class NoRouteFoundError(EarnBuilderError):
    """No direct or one-hop route exists from a reward token to the pool."""

    def __init__(self, reward_token: str, pool_tokens: tuple[str, str]) -> None:
        self.reward_token = reward_token
        self.pool_tokens = pool_tokens
        super().__init__(
            f"No route found from {reward_token} to {pool_tokens[0]} or {pool_tokens[1]}"
        )


class ChainConfigError(EarnBuilderError):
    """Unknown chain or invalid chain configuration."""

    pass


class FarmReadError(EarnBuilderError):
    """The farm contract did not report a usable LP token."""

    pass
