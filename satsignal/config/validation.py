"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


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
    def validate_market_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate market provider parameters."""
        errors = []

        for name in ("timeout_seconds", "poll_interval_seconds"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        for name in ("fear_greed_url", "markets_url"):
            if name in params:
                value = params[name]
                if not isinstance(value, str) or not value.startswith(("http://", "https://")):
                    errors.append(ValidationError(
                        field=name,
                        message="Must be an http(s) URL",
                        value=value
                    ))

        if "mock_price" in params:
            value = params["mock_price"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="mock_price",
                    message="Must be a positive number",
                    value=value
                ))

        if "mock_fear_index" in params:
            value = params["mock_fear_index"]
            if not _is_number(value) or value < 0 or value > 100:
                errors.append(ValidationError(
                    field="mock_fear_index",
                    message="Must be a number between 0 and 100",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_retry_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate retry parameters."""
        errors = []

        if "max_attempts" in params:
            value = params["max_attempts"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                errors.append(ValidationError(
                    field="max_attempts",
                    message="Must be a positive integer",
                    value=value
                ))

        if "backoff_base_seconds" in params:
            value = params["backoff_base_seconds"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="backoff_base_seconds",
                    message="Must be a non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in (
                "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"
            ):
                errors.append(ValidationError(
                    field="level",
                    message="Must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        validators = {
            "market": ConfigValidator.validate_market_params,
            "retry": ConfigValidator.validate_retry_params,
            "logging": ConfigValidator.validate_logging_params,
        }
        for section, validate in validators.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping of settings",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
