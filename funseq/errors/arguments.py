"""
Argument error classifications for sequence operations.

These exceptions describe a caller handing an operation something it
cannot work with: a missing sequence, a missing function, a missing
element, or an element of the wrong kind.
"""

from typing import Optional, Dict, Any


class FunctionalError(Exception):
    """Base class for all errors raised by funseq."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class InvalidArgumentError(FunctionalError, ValueError):
    """An argument or element is not usable by the operation."""

    def __init__(self, message: str, argument: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.argument = argument


class NullReferenceError(InvalidArgumentError):
    """A required sequence, element, function or function result is None."""

    def __init__(self, message: str, argument: Optional[str] = None,
                 position: Optional[int] = None, **kwargs):
        super().__init__(message, argument=argument, **kwargs)
        self.position = position


class AbsentValueError(FunctionalError, LookupError):
    """Value requested from an absent Option."""
