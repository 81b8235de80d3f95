"""
Sequence-producing operations.

Operations here return new sequences (lazy views or grouped lists)
rather than scalar aggregates.
"""

from .flatten import FlatView, flat_transform
from .grouping import group
from .options import is_present, is_some_, somes

__all__ = ["FlatView", "flat_transform", "group", "is_present", "is_some_", "somes"]
