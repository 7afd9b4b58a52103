"""Safe integer wrapper for arithmetic on reserve amounts.

Reserve values routinely exceed 64 bits, so all depth math runs on Python
ints wrapped in SafeInt:
- Division by a zero divisor returns None via checked_div
- uint256 overflow is caught on conversion with ArithmeticOverflowError

Usage pattern:
    from earn_builder.safe_int import S

    depth = (S(reserve_in) * S(mid_in)).checked_div(S(mid_in) + S(reserve_out))
    if depth is not None:
        value = depth.to_uint256()
"""

from __future__ import annotations

from earn_builder.models.types import UINT256_MAX


class SafeIntError(ArithmeticError):
    """Base class for SafeInt arithmetic errors."""

    pass


class ArithmeticOverflowError(SafeIntError):
    """Value does not fit in uint256."""

    pass


class SafeInt:
    """Integer with checked arithmetic.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | SafeInt) -> None:
        if isinstance(value, SafeInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"SafeInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    def __repr__(self) -> str:
        return f"SafeInt({self._value})"

    def __add__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value + _extract_value(other))

    def __mul__(self, other: SafeInt | int) -> SafeInt:
        return SafeInt(self._value * _extract_value(other))

    def checked_div(self, other: SafeInt | int) -> SafeInt | None:
        """Floor-divide, returning None on a zero divisor."""
        other_val = _extract_value(other)
        if other_val == 0:
            return None
        return SafeInt(self._value // other_val)

    def to_uint256(self) -> int:
        """Convert to int, validating uint256 bounds.

        Raises:
            ArithmeticOverflowError: If value is negative or exceeds 2^256-1
        """
        if self._value < 0:
            raise ArithmeticOverflowError(f"Negative value cannot be uint256: {self._value}")
        if self._value > UINT256_MAX:
            raise ArithmeticOverflowError(f"Value exceeds uint256 max: {self._value}")
        return self._value


def _extract_value(x: SafeInt | int) -> int:
    if isinstance(x, SafeInt):
        return x._value
    return x


# Convenience alias for concise code
S = SafeInt
