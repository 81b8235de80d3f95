"""Pytest configuration and shared fixtures."""

import pytest
from typing import List

from funseq.models.option import Option


class CountingIterable:
    """Restartable iterable recording how many elements were consumed."""

    def __init__(self, items):
        self.items = list(items)
        self.consumed = 0
        self.traversals = 0

    def __iter__(self):
        self.traversals += 1
        for item in self.items:
            self.consumed += 1
            yield item


@pytest.fixture
def sample_ints() -> List[int]:
    """Mixed-sign integers for summation tests."""
    return [3, -7, 12, 0, 41, -2]


@pytest.fixture
def sample_options() -> List[Option[int]]:
    """Options with absent entries interleaved."""
    return [Option.absent(), Option.of(2), Option.absent(), Option.of(3)]


@pytest.fixture
def sample_words() -> List[str]:
    """Words to group by their first letter."""
    return ["apple", "banana", "avocado", "cherry", "blueberry", "apricot"]


@pytest.fixture
def counting_iterable():
    """Factory for iterables that record consumption."""
    return CountingIterable
