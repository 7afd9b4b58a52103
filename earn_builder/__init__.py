"""Earn config builder for MinichefV2 auto-compounding strategies."""

from earn_builder.builder import build_earn_config, build_strat_config
from earn_builder.config import ChainConfig, get_chain_config
from earn_builder.resolver import EarnConfigResolver, EarnConfigResult

__version__ = "0.1.0"
__all__ = [
    "ChainConfig",
    "EarnConfigResolver",
    "EarnConfigResult",
    "build_earn_config",
    "build_strat_config",
    "get_chain_config",
    "__version__",
]
