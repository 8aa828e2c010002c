"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import DATE_RANGE_OPTIONS, FILTER_OPTIONS, SORT_OPTIONS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_journal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate journal parameters."""
        errors = []

        # Validate default_starting_balance
        if "default_starting_balance" in params:
            value = params["default_starting_balance"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="default_starting_balance",
                    message="Must be a non-negative number",
                    value=value
                ))

        # Validate list controls
        for field_name, allowed in (
            ("default_sort", SORT_OPTIONS),
            ("default_filter", FILTER_OPTIONS),
            ("default_date_range", DATE_RANGE_OPTIONS),
        ):
            if field_name in params and params[field_name] not in allowed:
                errors.append(ValidationError(
                    field=field_name,
                    message=f"Must be one of {', '.join(allowed)}",
                    value=params[field_name]
                ))

        return errors

    @staticmethod
    def validate_storage_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate storage parameters."""
        errors = []

        if "db_path" in params:
            value = params["db_path"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="db_path",
                    message="Must be a non-empty path",
                    value=value
                ))

        if "timeout_seconds" in params:
            value = params["timeout_seconds"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="timeout_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_display_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate display parameters."""
        errors = []

        if "unknown_price_decimals" in params:
            value = params["unknown_price_decimals"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                errors.append(ValidationError(
                    field="unknown_price_decimals",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "currency" in params:
            value = params["currency"]
            if value != "USD":
                errors.append(ValidationError(
                    field="currency",
                    message="Only USD is supported",
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

        if "journal" in config:
            errors.extend(ConfigValidator.validate_journal_params(config["journal"]))

        if "storage" in config:
            errors.extend(ConfigValidator.validate_storage_params(config["storage"]))

        if "display" in config:
            errors.extend(ConfigValidator.validate_display_params(config["display"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
