"""
Operations bound to a loaded configuration.

FunctionToolkit carries the configured integer width and or_ traversal
mode so callers do not thread them through every call. Operations that
take no configuration are exposed unchanged.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from .aggregates.arithmetic import or_, sum_alternative, sum_ints, sum_optional
from .aggregates.equality import elements_equal
from .aggregates.fold import fold
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .errors import ConfigurationError
from .logging import get_config_logger
from .models.option import Option
from .sequences.flatten import flat_transform
from .sequences.grouping import group
from .sequences.options import is_some_, somes


@dataclass(frozen=True)
class FunctionToolkit:
    """The funseq operations with configuration applied."""

    int_bits: Optional[int] = None
    or_short_circuit: bool = False

    flat_transform = staticmethod(flat_transform)
    group = staticmethod(group)
    fold = staticmethod(fold)
    somes = staticmethod(somes)
    is_some_ = staticmethod(is_some_)
    elements_equal = staticmethod(elements_equal)

    @classmethod
    def from_config(cls, config: dict[str, Any], source: Optional[str] = None) -> "FunctionToolkit":
        """
        Build a toolkit from a merged configuration dictionary.

        Raises:
            ConfigurationError: the configuration fails validation
        """
        errors = ConfigValidator.validate_config(config)
        if errors:
            raise ConfigurationError(
                f"Invalid configuration: {', '.join(e.field for e in errors)}",
                errors=errors,
                source=source,
            )

        toolkit = cls(
            int_bits=config.get("arithmetic", {}).get("int_bits"),
            or_short_circuit=config.get("evaluation", {}).get("or_short_circuit", False),
        )
        get_config_logger(__name__).debug(
            "Toolkit configured",
            int_bits=toolkit.int_bits,
            or_short_circuit=toolkit.or_short_circuit,
        )
        return toolkit

    @classmethod
    def load(cls, config_dir: Optional[Path] = None,
             overrides: Optional[dict[str, Any]] = None) -> "FunctionToolkit":
        """Load defaults, the YAML file in config_dir and overrides, then build."""
        loader = ConfigLoader.create(config_dir)
        return cls.from_config(loader.merge_config(overrides), source=str(loader.config_file))

    def sum_ints(self, ints: Iterable[int]) -> int:
        return sum_ints(ints, int_bits=self.int_bits)

    def sum_alternative(self, ints: Iterable[int]) -> int:
        return sum_alternative(ints, int_bits=self.int_bits)

    def sum_optional(self, options: Iterable[Option[int]]) -> Option[int]:
        return sum_optional(options, int_bits=self.int_bits)

    def or_(self, bools: Iterable[bool]) -> bool:
        return or_(bools, short_circuit=self.or_short_circuit)
