"""Chain configuration for earn config building.

Chain settings are plain values passed into the resolver; CHAIN_CONFIGS is
only consulted at the edge (CLI) to pick one by chain id.
"""

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

from earn_builder.constants import DEFAULT_FEE_FACTOR, FEE_DENOMINATOR, WAVAX, WBNB, WETH, WFTM, WMATIC
from earn_builder.errors import ChainConfigError
from earn_builder.models.types import normalize_address


@dataclass(frozen=True)
class ChainConfig:
    """Per-chain settings for route resolution.

    Attributes:
        chain_id: EVM chain id
        key: Short chain name; lowercased it names the output directory
        rpc_url: HTTP RPC endpoint
        wrapped_native: Wrapped native currency, the default routing intermediary
        fee_factor: Swap fee complement over FEE_DENOMINATOR (9970 = 0.30% fee)
        intermediaries: Routing currencies in priority order.
            Defaults to (wrapped_native,).
    """

    chain_id: int
    key: str
    rpc_url: str
    wrapped_native: str
    fee_factor: int = DEFAULT_FEE_FACTOR
    intermediaries: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        if not 0 < self.fee_factor <= FEE_DENOMINATOR:
            raise ChainConfigError(
                f"fee_factor must be in (0, {FEE_DENOMINATOR}], got {self.fee_factor}"
            )
        try:
            wrapped = normalize_address(self.wrapped_native, validate=True)
            intermediaries = tuple(
                normalize_address(a, validate=True) for a in self.intermediaries
            )
        except ValueError as err:
            raise ChainConfigError(str(err)) from err
        # Frozen dataclass: assign normalized values through object.__setattr__
        object.__setattr__(self, "wrapped_native", wrapped)
        object.__setattr__(self, "intermediaries", intermediaries or (wrapped,))

    @property
    def output_key(self) -> str:
        return self.key.lower()


CHAIN_CONFIGS: dict[int, ChainConfig] = {
    1: ChainConfig(chain_id=1, key="ETH", rpc_url="https://eth.llamarpc.com", wrapped_native=WETH),
    56: ChainConfig(
        chain_id=56, key="BSC", rpc_url="https://bsc-dataseed.binance.org", wrapped_native=WBNB
    ),
    137: ChainConfig(
        chain_id=137, key="Polygon", rpc_url="https://polygon-rpc.com", wrapped_native=WMATIC
    ),
    250: ChainConfig(chain_id=250, key="FTM", rpc_url="https://rpc.ftm.tools", wrapped_native=WFTM),
    43114: ChainConfig(
        chain_id=43114,
        key="AVAX",
        rpc_url="https://api.avax.network/ext/bc/C/rpc",
        wrapped_native=WAVAX,
    ),
}


def get_chain_config(chain_id: int) -> ChainConfig:
    """Look up a chain, applying RPC overrides from the environment.

    EARN_RPC_URL_<KEY> (e.g. EARN_RPC_URL_BSC) takes precedence over
    EARN_RPC_URL, which takes precedence over the built-in default.

    Raises:
        ChainConfigError: If the chain id is unknown
    """
    chain = CHAIN_CONFIGS.get(chain_id)
    if chain is None:
        known = ", ".join(str(c) for c in sorted(CHAIN_CONFIGS))
        raise ChainConfigError(f"Unknown chain id {chain_id} (known: {known})")

    rpc_url = os.environ.get(f"EARN_RPC_URL_{chain.key.upper()}") or os.environ.get("EARN_RPC_URL")
    if rpc_url:
        chain = replace(chain, rpc_url=rpc_url)
    return chain


@dataclass(frozen=True)
class BuilderSettings:
    """Output settings for generated config files."""

    vaults_config_dir: Path = Path("vaults-config")

    @classmethod
    def from_env(cls) -> "BuilderSettings":
        return cls(vaults_config_dir=Path(os.environ.get("EARN_VAULTS_CONFIG_DIR", "vaults-config")))

    def output_path(self, chain: ChainConfig, farm_name: str, symbol0: str, symbol1: str) -> Path:
        """Path of the strat config file for a farm pool."""
        return self.vaults_config_dir / chain.output_key / f"{farm_name}-{symbol0}-{symbol1}.json"
