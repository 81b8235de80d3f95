"""
Integer and boolean aggregates.

sum_ints is the direct accumulating loop; sum_alternative and
sum_optional go through fold. With the same int_bits both integer sums
agree on every input.
"""

from functools import partial
from typing import Iterable, Optional

from ..errors import InvalidArgumentError
from ..models.option import Option
from ..sequences.options import somes
from ..utils.guards import require, require_elements
from ..utils.ints import check_int_bits, wrap_int
from .fold import fold


def add(a: int, b: int, int_bits: Optional[int] = None) -> int:
    """Integer addition, wrapped to int_bits when given."""
    return wrap_int(a + b, int_bits)


def add_optional(a: Option[int], b: int, int_bits: Optional[int] = None) -> Option[int]:
    """
    Add b to an optional accumulator.

    An absent accumulator starts from b. Under sum_optional the absent
    branch only runs for the first present value.
    """
    return Option.of(add(a.get(), b, int_bits)) if a.is_present else Option.of(wrap_int(b, int_bits))


def _check_int(value: object, argument: str, position: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{argument} contains a non-integer value at position {position}: {value!r}",
            argument=argument,
        )


def _checked_ints(ints: Iterable[Optional[int]]) -> Iterable[int]:
    for position, value in enumerate(require_elements(ints, "ints")):
        _check_int(value, "ints", position)
        yield value


def _checked_options(options: Iterable[Option[int]]) -> Iterable[Option[int]]:
    """Check present values, counting positions over every entry."""
    for position, option in enumerate(options):
        if isinstance(option, Option) and option.is_present:
            _check_int(option.get(), "options", position)
        yield option


def sum_ints(ints: Iterable[int], int_bits: Optional[int] = None) -> int:
    """
    Sums integers.

    Args:
        ints: Integers to add
        int_bits: Wrap every partial sum to this signed width; None keeps
            Python's unbounded integers

    Returns:
        Sum of ints, 0 when empty

    Raises:
        NullReferenceError: ints or any of its elements is None
    """
    require(ints, "ints")
    check_int_bits(int_bits)
    total = 0
    for value in _checked_ints(ints):
        total = wrap_int(total + value, int_bits)
    return total


def sum_alternative(ints: Iterable[int], int_bits: Optional[int] = None) -> int:
    """
    Sums integers through fold with add as the combining step.

    Raises:
        NullReferenceError: ints or any of its elements is None
    """
    require(ints, "ints")
    check_int_bits(int_bits)
    return fold(_checked_ints(ints), 0, partial(add, int_bits=int_bits))


def sum_optional(options: Iterable[Option[int]], int_bits: Optional[int] = None) -> Option[int]:
    """
    Sums the present values of options.

    Returns:
        Option.absent() when no entry is present, otherwise the sum of the
        present values

    Raises:
        NullReferenceError: options or any of its entries is None
    """
    require(options, "options")
    check_int_bits(int_bits)
    return fold(somes(_checked_options(options)), Option.absent(), partial(add_optional, int_bits=int_bits))


def or_(bools: Iterable[bool], short_circuit: bool = False) -> bool:
    """
    Returns True if any element of bools is True.

    Every element is visited unless short_circuit is set, in which case
    iteration stops at the first True.

    Args:
        bools: Booleans to check
        short_circuit: Stop consuming bools once the result is known

    Returns:
        True if any element is True, False otherwise (including empty)

    Raises:
        NullReferenceError: bools or any visited element is None
        InvalidArgumentError: a visited element is not a bool
    """
    require(bools, "bools")
    result = False
    for position, value in enumerate(require_elements(bools, "bools")):
        if not isinstance(value, bool):
            raise InvalidArgumentError(
                f"bools contains a non-boolean value at position {position}: {value!r}",
                argument="bools",
            )
        result |= value
        if result and short_circuit:
            break
    return result
