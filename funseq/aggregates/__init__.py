"""
Aggregating operations.

Everything here reduces a sequence to a single value. Sums and the
optional-aware sum share the left fold in fold.py.
"""

from .arithmetic import add, add_optional, or_, sum_alternative, sum_ints, sum_optional
from .equality import elements_equal
from .fold import Combiner, fold

__all__ = [
    "Combiner",
    "add",
    "add_optional",
    "elements_equal",
    "fold",
    "or_",
    "sum_alternative",
    "sum_ints",
    "sum_optional",
]
