"""Protocol constants for earn config building.

Centralizes well-known addresses and fee parameters.
"""

from earn_builder.models.types import is_valid_address

# Fee factors are expressed over this denominator
FEE_DENOMINATOR = 10_000

# Complement of the 0.30% UniswapV2 swap fee: 10000 - 30
DEFAULT_FEE_FACTOR = FEE_DENOMINATOR - 30


def _validate_token_address(name: str, address: str) -> str:
    """Validate and return a token address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Wrapped native tokens (lowercase for consistency)
# All addresses are validated at import time to catch typos early
WETH = _validate_token_address("WETH", "0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2")
WBNB = _validate_token_address("WBNB", "0xbb4cdb9cbd36b01bd1cbaebf2de08d9173bc095c")
WMATIC = _validate_token_address("WMATIC", "0x0d500b1d8e8ef31e21c99d1db9a6444d3adf1270")
WAVAX = _validate_token_address("WAVAX", "0xb31f66aa3c1e785363f0875a1b74e27b85fd66c7")
WFTM = _validate_token_address("WFTM", "0x21be370d5312f44cb42ce377bc9b8a0cef1a4c83")
