"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_arithmetic_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate arithmetic parameters."""
        errors = []

        if "int_bits" in params:
            value = params["int_bits"]
            if value is not None and (
                isinstance(value, bool)
                or not isinstance(value, int)
                or not 8 <= value <= 128
                or value % 8 != 0
            ):
                errors.append(ValidationError(
                    field="int_bits",
                    message="Must be null or a multiple of 8 between 8 and 128",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_evaluation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate evaluation parameters."""
        errors = []

        if "or_short_circuit" in params:
            value = params["or_short_circuit"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="or_short_circuit",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in ("arithmetic", "evaluation"):
            if section in config and not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))

        if isinstance(config.get("arithmetic"), dict):
            errors.extend(ConfigValidator.validate_arithmetic_params(config["arithmetic"]))

        if isinstance(config.get("evaluation"), dict):
            errors.extend(ConfigValidator.validate_evaluation_params(config["evaluation"]))

        return errors
