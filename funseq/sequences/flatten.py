"""Flatten / flat-map over iterables."""

from typing import Callable, Generic, Iterable, Iterator, TypeVar

from ..errors import NullReferenceError
from ..utils.guards import require

A = TypeVar("A")
B = TypeVar("B")


class FlatView(Generic[A, B]):
    """
    Lazy concatenation of function(a) for every a in source.

    Each traversal calls function once per outer element. The view is
    restartable when source is; over a plain iterator it is single pass.
    """

    def __init__(self, source: Iterable[A], function: Callable[[A], Iterable[B]]):
        self._source = source
        self._function = function

    def __iter__(self) -> Iterator[B]:
        for position, outer in enumerate(self._source):
            inner = self._function(outer)
            if inner is None:
                raise NullReferenceError(
                    f"function returned None for element at position {position}",
                    argument="function",
                    position=position,
                )
            yield from inner

    def __repr__(self) -> str:
        return f"FlatView({self._source!r}, {self._function!r})"


def flat_transform(iterable: Iterable[A], function: Callable[[A], Iterable[B]]) -> FlatView[A, B]:
    """
    Flatten the results of applying function to every element.

    Like flatMap or monadic bind, restricted to iterables:
    [a1, a2, ...] -> function(a1) ++ function(a2) ++ ...

    Args:
        iterable: Outer elements
        function: Maps one outer element to an iterable of results

    Returns:
        Lazy view over the concatenated inner iterables

    Raises:
        NullReferenceError: iterable or function is None
    """
    require(iterable, "iterable")
    require(function, "function")
    return FlatView(iterable, function)
