"""
funseq - Functional Sequence Utilities

Stateless higher-order helpers over Python iterables: flatten/flat-map,
left fold, stable grouping, integer summation, logical-or, elements-equal
and aggregation over optional values.
"""

from .aggregates.arithmetic import add, add_optional, or_, sum_alternative, sum_ints, sum_optional
from .aggregates.equality import elements_equal
from .aggregates.fold import Combiner, fold
from .models.option import Option
from .sequences.flatten import FlatView, flat_transform
from .sequences.grouping import group
from .sequences.options import is_present, is_some_, somes

__version__ = "0.1.0"
__author__ = "funseq Team"

__all__ = [
    "Combiner",
    "FlatView",
    "Option",
    "add",
    "add_optional",
    "elements_equal",
    "flat_transform",
    "fold",
    "group",
    "is_present",
    "is_some_",
    "or_",
    "somes",
    "sum_alternative",
    "sum_ints",
    "sum_optional",
]
