"""Pydantic models for earn config documents."""

from earn_builder.models.earn_config import (
    EarnConfig,
    StratConfig,
    StratInfo,
    SwapRouteConfig,
    ZapLiquidityConfig,
)
from earn_builder.models.types import Address

__all__ = [
    # Types
    "Address",
    # Config models
    "EarnConfig",
    "StratConfig",
    "StratInfo",
    "SwapRouteConfig",
    "ZapLiquidityConfig",
]
