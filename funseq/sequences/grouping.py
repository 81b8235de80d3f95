"""Stable grouping of elements by a derived key."""

from typing import Callable, Hashable, Iterable, TypeVar

from ..errors import NullReferenceError
from ..utils.guards import require, require_elements

A = TypeVar("A")
B = TypeVar("B", bound=Hashable)


def group(iterable: Iterable[A], key: Callable[[A], B]) -> list[list[A]]:
    """
    Group elements into a list of lists, grouping determined by key.

    Groups appear in the order their key is first seen and each group
    keeps the original relative order of its elements.

    Args:
        iterable: The elements to group
        key: Determines the property to group by

    Returns:
        A list of grouped elements

    Raises:
        NullReferenceError: iterable, key, any element, or any key is None
    """
    require(iterable, "iterable")
    require(key, "key")

    groups: dict[B, list[A]] = {}
    for position, element in enumerate(require_elements(iterable, "iterable")):
        group_key = key(element)
        if group_key is None:
            raise NullReferenceError(
                f"key returned None for element at position {position}",
                argument="key",
                position=position,
            )
        groups.setdefault(group_key, []).append(element)

    return list(groups.values())
