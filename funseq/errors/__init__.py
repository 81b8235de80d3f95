"""
Error classification for the functional sequence utilities.

Every failure is raised at the function-call boundary and propagates
unchanged to the caller.
"""

from .arguments import (
    FunctionalError,
    InvalidArgumentError,
    NullReferenceError,
    AbsentValueError,
)
from .configuration import ConfigurationError

__all__ = [
    # Argument Errors
    "FunctionalError",
    "InvalidArgumentError",
    "NullReferenceError",
    "AbsentValueError",
    # Configuration Errors
    "ConfigurationError",
]
