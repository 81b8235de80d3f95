"""Left fold, the shared reduction primitive."""

from typing import Iterable, Protocol, TypeVar

from ..utils.guards import require

X = TypeVar("X")
Y = TypeVar("Y")
X_co = TypeVar("X_co", covariant=True)
X_contra = TypeVar("X_contra", contravariant=True)
Y_contra = TypeVar("Y_contra", contravariant=True)


class Combiner(Protocol[X_contra, Y_contra, X_co]):
    """Two-argument fold step: (accumulator, element) -> accumulator."""

    def __call__(self, accumulator: X_contra, element: Y_contra) -> X_co:
        ...


def fold(iterable: Iterable[Y], initial: X, function: Combiner[X, Y, X]) -> X:
    """
    Left fold.

    (a, b, c, d), initial -> f(f(f(f(initial, a), b), c), d)

    Args:
        iterable: Elements to reduce, consumed once, left to right
        initial: Starting accumulator, returned unchanged for an empty iterable
        function: Combining step

    Returns:
        The final accumulator

    Raises:
        NullReferenceError: iterable or function is None
    """
    require(iterable, "iterable")
    require(function, "function")

    accumulator = initial
    for element in iterable:
        accumulator = function(accumulator, element)
    return accumulator
