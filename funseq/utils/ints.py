"""
Fixed-width integer arithmetic.

Python integers never overflow. When an operation is asked for a bit
width, results are wrapped to a signed two's-complement integer of that
width, matching native machine integer addition.
"""

from typing import Optional

from ..errors import InvalidArgumentError


def check_int_bits(int_bits: Optional[int]) -> Optional[int]:
    """
    Return int_bits unchanged if it is None or a positive integer.

    Raises:
        InvalidArgumentError: int_bits is a bool, not an int, or below 1
    """
    if int_bits is not None and (
        isinstance(int_bits, bool) or not isinstance(int_bits, int) or int_bits < 1
    ):
        raise InvalidArgumentError(
            f"int_bits must be None or a positive integer, got {int_bits!r}",
            argument="int_bits",
        )
    return int_bits


def int_bounds(int_bits: int) -> tuple[int, int]:
    """Return the (min, max) representable values for a signed width."""
    half = 1 << (check_int_bits(int_bits) - 1)
    return -half, half - 1


def wrap_int(value: int, int_bits: Optional[int] = None) -> int:
    """
    Wrap value to a signed integer of int_bits bits.

    Args:
        value: Integer to wrap
        int_bits: Bit width, or None for unbounded Python integers

    Returns:
        value reduced into [-2**(int_bits-1), 2**(int_bits-1))

    Raises:
        InvalidArgumentError: int_bits is not None or a positive integer
    """
    if check_int_bits(int_bits) is None:
        return value

    low, _ = int_bounds(int_bits)
    return ((value - low) % (1 << int_bits)) + low
