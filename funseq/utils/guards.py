"""
Argument guards raising NullReferenceError.

Operations call these before producing any output so a missing argument
fails the call as a whole.
"""

from typing import Iterable, Iterator, Optional, TypeVar

from ..errors import NullReferenceError

T = TypeVar("T")


def require(value: Optional[T], argument: str) -> T:
    """
    Return value unchanged, raising if it is None.

    Args:
        value: Argument to check
        argument: Argument name used in the error message

    Returns:
        The value itself
    """
    if value is None:
        raise NullReferenceError(f"{argument} must not be None", argument=argument)
    return value


def require_elements(iterable: Iterable[Optional[T]], argument: str) -> Iterator[T]:
    """
    Yield the elements of iterable, raising on the first None element.

    The error carries the zero-based position of the offending element.
    """
    for position, element in enumerate(iterable):
        if element is None:
            raise NullReferenceError(
                f"{argument} contains None at position {position}",
                argument=argument,
                position=position,
            )
        yield element
