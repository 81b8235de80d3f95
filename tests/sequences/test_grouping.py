"""Tests for stable grouping."""

from collections import Counter

import pytest

from funseq.errors import NullReferenceError
from funseq.sequences.grouping import group


class TestGroup:
    """Test grouping semantics."""

    def test_groups_by_key_in_first_occurrence_order(self, sample_words):
        """Groups follow first appearance of their key."""
        result = group(sample_words, lambda w: w[0])
        assert result == [
            ["apple", "avocado", "apricot"],
            ["banana", "blueberry"],
            ["cherry"],
        ]

    def test_partition_properties(self):
        """Groups cover the input and share one key each."""
        values = [5, 12, 7, 3, 10, 8, 1, 12]
        key = lambda n: n % 3
        result = group(values, key)

        flattened = [v for g in result for v in g]
        assert Counter(flattened) == Counter(values)

        for members in result:
            assert len({key(v) for v in members}) == 1
            positions = [i for i, v in enumerate(values) if key(v) == key(members[0])]
            assert members == [values[i] for i in positions]

    def test_empty_input(self):
        """No elements means no groups."""
        assert group([], lambda x: x) == []

    def test_keys_use_value_equality(self):
        """Equal but distinct key objects land in one group."""
        result = group(["a", "bb", "cc", "d"], lambda s: (len(s),))
        assert result == [["a", "d"], ["bb", "cc"]]

    def test_accepts_iterators(self):
        """Single-pass input is consumed once."""
        assert group(iter([1, 2, 3, 4]), lambda n: n % 2 == 0) == [[1, 3], [2, 4]]


class TestGroupErrors:
    """Test missing arguments and values."""

    def test_none_iterable(self):
        """A None iterable is rejected."""
        with pytest.raises(NullReferenceError):
            group(None, lambda x: x)

    def test_none_key_function(self):
        """A None key function is rejected."""
        with pytest.raises(NullReferenceError):
            group([1], None)

    def test_none_element(self):
        """None elements are rejected with their position."""
        with pytest.raises(NullReferenceError) as exc_info:
            group([1, None], lambda x: x)
        assert exc_info.value.position == 1

    def test_none_key(self):
        """A key function returning None is rejected."""
        with pytest.raises(NullReferenceError) as exc_info:
            group([1, 2], lambda x: None)
        assert exc_info.value.argument == "key"
