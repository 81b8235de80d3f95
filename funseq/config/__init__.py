"""
Configuration for funseq operations.

Defaults live in frozen dataclasses, a YAML file can override them, and
call sites can override both.
"""

from .defaults import ArithmeticParams, DefaultConfig, EvaluationParams, get_default_config
from .loader import ConfigLoader
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ArithmeticParams",
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "EvaluationParams",
    "ValidationError",
    "get_default_config",
]
