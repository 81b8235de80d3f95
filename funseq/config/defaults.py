"""Default configuration parameters for funseq operations."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ArithmeticParams:
    """Integer summation parameters."""
    int_bits: Optional[int] = None                   # Signed wrap width, None = unbounded


@dataclass(frozen=True)
class EvaluationParams:
    """Traversal parameters."""
    or_short_circuit: bool = False                   # Stop or_ at the first True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    arithmetic: ArithmeticParams
    evaluation: EvaluationParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        arithmetic=ArithmeticParams(),
        evaluation=EvaluationParams(),
    )
