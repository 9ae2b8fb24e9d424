"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
SECTIONS = ("rounding", "compounding", "logging")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_rounding_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rounding parameters."""
        errors = []

        if "decimal_places" in params:
            value = params["decimal_places"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="decimal_places",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_compounding_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate compounding parameters."""
        errors = []

        if "default_frequency" in params:
            value = params["default_frequency"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="default_frequency",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for key in config:
            if key not in SECTIONS:
                errors.append(ValidationError(
                    field=key,
                    message=f"Unknown section, expected one of {', '.join(SECTIONS)}",
                    value=config[key]
                ))

        for section in SECTIONS:
            if section in config and not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))
        if errors:
            return errors

        if "rounding" in config:
            errors.extend(ConfigValidator.validate_rounding_params(config["rounding"]))

        if "compounding" in config:
            errors.extend(ConfigValidator.validate_compounding_params(config["compounding"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
