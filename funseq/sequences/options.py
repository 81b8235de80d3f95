"""Operations over sequences of Option values."""

from typing import Any, Callable, Generic, Iterable, Iterator, TypeVar

from ..errors import InvalidArgumentError
from ..models.option import Option
from ..utils.guards import require, require_elements

A = TypeVar("A")


def is_present(option: Option[Any]) -> bool:
    """Report whether option holds a value."""
    return option.is_present


def is_some_() -> Callable[[Option[A]], bool]:
    """Return a reusable, stateless presence predicate."""
    return is_present


class _Somes(Generic[A]):
    """Restartable view of the present values of an iterable of options."""

    def __init__(self, options: Iterable[Option[A]]):
        self._options = options

    def __iter__(self) -> Iterator[A]:
        for position, option in enumerate(require_elements(self._options, "options")):
            if not isinstance(option, Option):
                raise InvalidArgumentError(
                    f"options contains a non-Option value at position {position}",
                    argument="options",
                )
            if is_present(option):
                yield option.get()


def somes(options: Iterable[Option[A]]) -> Iterable[A]:
    """
    Return all the values in the given options, skipping absent ones.

    Args:
        options: The potential values to get actual values from

    Returns:
        Lazy iterable of the present values, in original order

    Raises:
        NullReferenceError: options is None (at call time) or holds None
            (during iteration)
    """
    require(options, "options")
    return _Somes(options)
