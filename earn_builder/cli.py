"""Command-line entry point for generating MinichefV2 strategy configs.

Usage:
    minichef-v2-config -c 56 pcs 0xFarm... 3 0xReward1... 0xReward2...

Reads the farm pool, resolves an earn config for every reward token, prints
the strategy config JSON to stdout and, with --write, saves it under
<vaults-config>/<chain key>/<farm>-<symbol0>-<symbol1>.json.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

import structlog
from web3 import Web3

from earn_builder.builder import build_strat_config
from earn_builder.config import BuilderSettings, ChainConfig, get_chain_config
from earn_builder.farm import FarmPool, MinichefV2Reader
from earn_builder.models.types import normalize_address
from earn_builder.pairs.provider import PairReserveProvider
from earn_builder.pairs.web3_provider import Web3PairReserveProvider
from earn_builder.resolver import EarnConfigResolver

logger = structlog.get_logger()


def configure_logging(verbose: bool = False) -> None:
    """Send structured logs to stderr so stdout carries only the config JSON."""
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _address(value: str) -> str:
    try:
        return normalize_address(value, validate=True)
    except ValueError as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minichef-v2-config",
        description="Generates a MinichefV2 StratX4 config",
    )
    parser.add_argument("-c", "--chain-id", type=int, required=True, help="Chain ID")
    parser.add_argument(
        "-w",
        "--write",
        action="store_true",
        help="Write the config file into the vaults config directory",
    )
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Vaults config directory (default: $EARN_VAULTS_CONFIG_DIR or vaults-config)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("farm_name", help="Farm name")
    parser.add_argument("farm_contract_address", type=_address, help="Farm contract address (MinichefV2)")
    parser.add_argument("pid", type=int, help="pid of pool")
    parser.add_argument("reward_addresses", type=_address, nargs="+", help="Reward addresses")
    return parser


def connect(chain: ChainConfig) -> Web3:
    return Web3(Web3.HTTPProvider(chain.rpc_url))


def read_farm(w3: Web3, farm_address: str, pid: int) -> FarmPool:
    return MinichefV2Reader(w3).read_pool(farm_address, pid)


def make_provider(w3: Web3, factory: str) -> PairReserveProvider:
    return Web3PairReserveProvider(w3, factory)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the config generator.

    Returns:
        0 on success, 1 if the farm could not be read or any reward failed
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        chain = get_chain_config(args.chain_id)
        w3 = connect(chain)
        farm = read_farm(w3, args.farm_contract_address, args.pid)
    except Exception as e:
        # Config errors and RPC or contract failures while reading the farm
        logger.error("farm_setup_failed", error_type=type(e).__name__, error=str(e))
        return 1

    resolver = EarnConfigResolver(make_provider(w3, farm.factory), farm.tokens, chain)
    results = asyncio.run(resolver.resolve_many(args.reward_addresses))

    failed = [r for r in results if not r.is_valid]
    if failed:
        logger.error(
            "strat_config_incomplete",
            failed_rewards=[r.reward_token for r in failed],
            resolved=len(results) - len(failed),
        )
        return 1

    strat_config = build_strat_config(
        asset=farm.asset,
        pid=farm.pid,
        farm_contract_address=farm.farm_address,
        earn_configs=[r.earn_config for r in results if r.earn_config is not None],
    )
    document = strat_config.to_json()
    print(document)

    if args.write:
        settings = BuilderSettings.from_env()
        if args.output_dir:
            settings = BuilderSettings(vaults_config_dir=Path(args.output_dir))
        path = settings.output_path(chain, args.farm_name, farm.symbol0, farm.symbol1)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document, encoding="utf-8")
        logger.info("strat_config_written", path=str(path))

    return 0


if __name__ == "__main__":
    sys.exit(main())
