"""Pydantic models for the generated strategy configuration.

Field aliases match the JSON schema consumed by the vault deployment tooling.
"""

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from earn_builder.models.types import Address


class SwapRouteConfig(BaseModel):
    """Swap route from the reward token to a pool token."""

    fee_factors: list[int] = Field(alias="feeFactors", description="Fee complement per hop.")
    pairs_path: list[Address] = Field(alias="pairsPath", description="Pair used for each hop.")
    tokens_path: list[Address] = Field(alias="tokensPath", description="Tokens visited.")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def check_lengths(self) -> "SwapRouteConfig":
        if len(self.fee_factors) != len(self.pairs_path):
            raise ValueError(
                f"feeFactors length {len(self.fee_factors)} != pairsPath length {len(self.pairs_path)}"
            )
        if self.pairs_path and len(self.tokens_path) != len(self.pairs_path) + 1:
            raise ValueError(
                f"tokensPath length {len(self.tokens_path)} != pairsPath length + 1"
            )
        if not self.pairs_path and self.tokens_path:
            raise ValueError("tokensPath must be empty when there are no pairs")
        return self

    @property
    def is_empty(self) -> bool:
        return not self.pairs_path


class ZapLiquidityConfig(BaseModel):
    """How the converted token is split into pool liquidity."""

    fee_factor: int = Field(alias="feeFactor")
    lp_subtoken_in: Address = Field(alias="lpSubtokenIn")
    lp_subtoken_out: Address = Field(alias="lpSubtokenOut")

    model_config = {"populate_by_name": True}

    @model_validator(mode="after")
    def check_distinct(self) -> "ZapLiquidityConfig":
        if self.lp_subtoken_in == self.lp_subtoken_out:
            raise ValueError("lpSubtokenIn and lpSubtokenOut must differ")
        return self


class EarnConfig(BaseModel):
    """Per-reward earn configuration: swap route plus zap split."""

    reward_token: Address = Field(alias="rewardToken")
    swap_route: SwapRouteConfig = Field(alias="swapRoute")
    zap_liquidity_config: ZapLiquidityConfig = Field(alias="zapLiquidityConfig")

    model_config = {"populate_by_name": True}


class StratInfo(BaseModel):
    """Farm position the strategy stakes into."""

    asset: Address
    pid: int = Field(ge=0)
    farm_contract_address: Address = Field(alias="farmContractAddress")

    model_config = {"populate_by_name": True}


class StratConfig(BaseModel):
    """Full strategy configuration document."""

    strat_contract: Literal["MinichefLP1.sol:StratX4MinichefLP1"] = Field(
        default="MinichefLP1.sol:StratX4MinichefLP1",
        alias="StratContract",
    )
    strat: StratInfo
    earn_configs: list[EarnConfig] = Field(alias="earnConfigs")

    model_config = {"populate_by_name": True}

    def to_json(self) -> str:
        """Serialize with the schema's field names and 2-space indentation."""
        return self.model_dump_json(by_alias=True, indent=2)


__all__ = [
    "EarnConfig",
    "StratConfig",
    "StratInfo",
    "SwapRouteConfig",
    "ZapLiquidityConfig",
]
