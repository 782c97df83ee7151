"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import DEFAULT_BASELINE_MULTIPLIERS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
SORT_MODES = ("name-asc", "name-desc", "pinned")
KNOWN_SECTIONS = {
    "logging": ("level", "format_json", "include_timestamp"),
    "dashboard": ("recent_limit", "default_sort"),
    "history": ("baseline_multipliers",),
}


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

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

        for flag in ("format_json", "include_timestamp"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_dashboard_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate dashboard parameters."""
        errors = []

        if "recent_limit" in params:
            value = params["recent_limit"]
            # bool is an int subclass
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="recent_limit",
                    message="Must be a positive integer",
                    value=value
                ))

        if "default_sort" in params:
            value = params["default_sort"]
            if value not in SORT_MODES:
                errors.append(ValidationError(
                    field="default_sort",
                    message=f"Must be one of {', '.join(SORT_MODES)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_history_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate trailing baseline parameters."""
        errors = []

        multipliers = params.get("baseline_multipliers")
        if multipliers is None:
            return errors

        if not isinstance(multipliers, dict):
            errors.append(ValidationError(
                field="baseline_multipliers",
                message="Must be a mapping of timeframe to multiplier",
                value=multipliers
            ))
            return errors

        for timeframe, value in multipliers.items():
            if timeframe not in DEFAULT_BASELINE_MULTIPLIERS:
                errors.append(ValidationError(
                    field=f"baseline_multipliers.{timeframe}",
                    message="Unknown timeframe",
                    value=timeframe
                ))
            elif (not isinstance(value, (int, float)) or isinstance(value, bool)
                    or value <= 0 or value > 1):
                errors.append(ValidationError(
                    field=f"baseline_multipliers.{timeframe}",
                    message="Must be a positive number between 0 and 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section, params in config.items():
            if section not in KNOWN_SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=section
                ))
                continue
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            for key in params:
                if key not in KNOWN_SECTIONS[section]:
                    errors.append(ValidationError(
                        field=f"{section}.{key}",
                        message="Unknown parameter",
                        value=params[key]
                    ))

        if errors:
            return errors

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        if "dashboard" in config:
            errors.extend(ConfigValidator.validate_dashboard_params(config["dashboard"]))

        if "history" in config:
            errors.extend(ConfigValidator.validate_history_params(config["history"]))

        return errors
