"""Value types shared by the sequence operations."""

from .option import Option

__all__ = ["Option"]
