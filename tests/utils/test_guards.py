"""Tests for argument guards and fixed-width integer helpers."""

import pytest

from funseq.errors import InvalidArgumentError, NullReferenceError
from funseq.utils.guards import require, require_elements
from funseq.utils.ints import check_int_bits, int_bounds, wrap_int


class TestRequire:
    """Test require function."""

    def test_returns_value(self):
        """Non-None values pass through unchanged."""
        value = [1]
        assert require(value, "value") is value
        assert require(0, "value") == 0

    def test_rejects_none(self):
        """None raises with the argument name."""
        with pytest.raises(NullReferenceError) as exc_info:
            require(None, "ints")
        assert exc_info.value.argument == "ints"
        assert "ints must not be None" in str(exc_info.value)


class TestRequireElements:
    """Test require_elements function."""

    def test_yields_elements(self):
        """Elements pass through in order."""
        assert list(require_elements([1, 0, False], "items")) == [1, 0, False]

    def test_rejects_none_element(self):
        """The first None element raises with its position."""
        checked = require_elements(["a", None], "items")
        assert next(checked) == "a"
        with pytest.raises(NullReferenceError) as exc_info:
            next(checked)
        assert exc_info.value.position == 1


class TestWrapInt:
    """Test wrap_int function."""

    def test_unbounded(self):
        """Without a width values are unchanged."""
        assert wrap_int(2**100) == 2**100

    @pytest.mark.parametrize("bits", [8, 16, 32, 64])
    def test_bounds(self, bits):
        """Values at the edges wrap around to the other edge."""
        low, high = int_bounds(bits)
        assert wrap_int(high, bits) == high
        assert wrap_int(low, bits) == low
        assert wrap_int(high + 1, bits) == low
        assert wrap_int(low - 1, bits) == high

    def test_in_range_unchanged(self):
        """In-range values are unchanged."""
        assert wrap_int(-5, 8) == -5
        assert wrap_int(100, 8) == 100

    @pytest.mark.parametrize("int_bits", [0, -1, True, 8.0])
    def test_rejects_invalid_width(self, int_bits):
        """Widths must be None or a positive integer."""
        with pytest.raises(InvalidArgumentError) as exc_info:
            wrap_int(5, int_bits)
        assert exc_info.value.argument == "int_bits"

    def test_check_int_bits(self):
        """Valid widths pass through unchanged."""
        assert check_int_bits(None) is None
        assert check_int_bits(1) == 1
        assert int_bounds(1) == (-1, 0)
