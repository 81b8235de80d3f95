"""Elements-equal check based on de-duplication."""

from typing import Any, Callable, Hashable, Iterable, Optional, TypeVar

from ..utils.guards import require

A = TypeVar("A")


def _distinct_count(values: list[Any]) -> int:
    """Count distinct values, by equality alone when they cannot be hashed."""
    try:
        return len(set(values))
    except TypeError:
        first = values[0]
        return 1 if all(value == first for value in values) else 2


def elements_equal(iterable: Iterable[A], key: Optional[Callable[[A], Hashable]] = None) -> bool:
    """
    Returns True if all elements (or all their keys) are equal.

    Hashable values are de-duplicated through a set, so equal values must
    hash equally. Unhashable values such as lists are compared by equality
    against the first value. An empty iterable counts as all equal.

    Args:
        iterable: Elements to compare
        key: Applied to every element before comparison

    Returns:
        True when fewer than two distinct values remain

    Raises:
        NullReferenceError: iterable is None
    """
    require(iterable, "iterable")
    values = list(iterable) if key is None else [key(element) for element in iterable]
    return _distinct_count(values) < 2
