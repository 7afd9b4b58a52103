"""Shared type definitions for earn config models.

These types are used by the routing core and the serialized config models.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator, Field

# Maximum uint256 value
UINT256_MAX = 2**256 - 1

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def normalize_address(address: str, *, validate: bool = False) -> str:
    """Normalize an Ethereum address to lowercase.

    Args:
        address: An Ethereum address (with or without 0x prefix)
        validate: If True, raises ValueError for invalid addresses.

    Returns:
        Lowercase address with 0x prefix

    Raises:
        ValueError: If validate=True and address is not a valid Ethereum address
    """
    addr = address.lower()
    if not addr.startswith("0x"):
        addr = "0x" + addr

    if validate and not is_valid_address(addr):
        raise ValueError(f"Invalid address: {address}")

    return addr


def is_valid_address(address: str) -> bool:
    """Check if a string is a valid Ethereum address."""
    if not isinstance(address, str):
        return False
    if not address.startswith("0x"):
        return False
    if len(address) != 42:
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


def is_zero_address(address: str | None) -> bool:
    """True for None or the all-zero address (how factories report a missing pair)."""
    return address is None or int(address, 16) == 0


def address_key(address: str) -> int:
    """Numeric value of an address, used for canonical token ordering."""
    return int(address, 16)


def sort_tokens(token_a: str, token_b: str) -> tuple[str, str]:
    """Return (token0, token1) in the order a UniswapV2 pair stores them.

    The token with the smaller numeric value is token0.

    Raises:
        ValueError: If both tokens are the same address
    """
    if address_key(token_a) == address_key(token_b):
        raise ValueError(f"Identical tokens cannot form a pair: {token_a}")
    if address_key(token_a) < address_key(token_b):
        return token_a, token_b
    return token_b, token_a


def _validate_address(value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"Address must be a string, got {type(value).__name__}")
    return normalize_address(value, validate=True)


# Ethereum address, normalized to lowercase on validation
Address = Annotated[
    str,
    BeforeValidator(_validate_address),
    Field(description="Token or contract address (lowercase, 0x-prefixed)"),
]
