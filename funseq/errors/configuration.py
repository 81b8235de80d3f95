"""
Configuration error classification.

Raised when a loaded configuration fails validation before any
operation is bound to it.
"""

from typing import Optional, Any

from .arguments import FunctionalError


class ConfigurationError(FunctionalError):
    """Configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None,
                 source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.source = source
