"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any, Optional

SEQUENCE_SECTIONS = ("stretch", "fitness", "breathing_sequence")
KNOWN_SECTIONS = SEQUENCE_SECTIONS + (
    "breathing", "water", "sleep", "weight", "journal",
    "suggestions", "storage", "logging",
)
STORAGE_BACKENDS = ("sqlite", "memory")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _check(errors: list, params: dict, section: str, name: str,
           ok, message: str) -> None:
    if name in params and not ok(params[name]):
        errors.append(ValidationError(
            field=f"{section}.{name}",
            message=message,
            value=params[name]
        ))


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_sequence_params(params: dict[str, Any], section: str = "sequence") -> list[ValidationError]:
        """Validate guided sequence timer parameters."""
        errors: list[ValidationError] = []

        _check(errors, params, section, "transition_duration",
               lambda v: _is_int(v) and v >= 0, "Must be a non-negative integer")
        _check(errors, params, section, "min_item_duration",
               lambda v: _is_int(v) and v >= 1, "Must be a positive integer")
        _check(errors, params, section, "default_item_duration",
               lambda v: _is_int(v) and v >= 1, "Must be a positive integer")
        _check(errors, params, section, "tick_interval_seconds",
               lambda v: _is_number(v) and v > 0, "Must be a positive number")

        # The pre-filled duration must itself pass the input floor
        minimum = params.get("min_item_duration")
        default = params.get("default_item_duration")
        if _is_int(minimum) and _is_int(default) and default < minimum:
            errors.append(ValidationError(
                field=f"{section}.default_item_duration",
                message=f"Must be at least min_item_duration ({minimum})",
                value=default
            ))

        return errors

    @staticmethod
    def validate_breathing_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate breathing exercise parameters."""
        errors: list[ValidationError] = []

        for name in ("session_minutes", "min_session_minutes",
                     "max_session_minutes", "breath_cycle_seconds"):
            _check(errors, params, "breathing", name,
                   lambda v: _is_int(v) and v >= 1, "Must be a positive integer")

        low = params.get("min_session_minutes")
        high = params.get("max_session_minutes")
        session = params.get("session_minutes")
        if _is_int(low) and _is_int(high):
            if low > high:
                errors.append(ValidationError(
                    field="breathing.min_session_minutes",
                    message="Must not exceed max_session_minutes",
                    value=low
                ))
            elif _is_int(session) and not low <= session <= high:
                errors.append(ValidationError(
                    field="breathing.session_minutes",
                    message=f"Must be between {low} and {high}",
                    value=session
                ))

        return errors

    @staticmethod
    def validate_water_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate water intake parameters."""
        errors: list[ValidationError] = []

        _check(errors, params, "water", "daily_goal_ml",
               lambda v: _is_int(v) and v > 0, "Must be a positive integer")
        for name in ("cap_multiplier", "min_goal_ml", "goal_step_ml"):
            _check(errors, params, "water", name,
                   lambda v: _is_int(v) and v >= 1, "Must be a positive integer")

        goal, floor = params.get("daily_goal_ml"), params.get("min_goal_ml")
        if _is_int(goal) and _is_int(floor) and goal < floor:
            errors.append(ValidationError(
                field="water.daily_goal_ml",
                message=f"Must be at least min_goal_ml ({floor})",
                value=goal
            ))
        _check(errors, params, "water", "cup_sizes_ml",
               lambda v: isinstance(v, (list, tuple)) and len(v) > 0
               and all(_is_int(size) and size > 0 for size in v),
               "Must be a non-empty list of positive integers")

        return errors

    @staticmethod
    def validate_sleep_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate sleep tracker parameters."""
        errors: list[ValidationError] = []

        _check(errors, params, "sleep", "min_hours",
               lambda v: _is_number(v) and v > 0, "Must be a positive number")
        _check(errors, params, "sleep", "max_hours",
               lambda v: _is_number(v) and 0 < v <= 24, "Must be a number between 0 and 24")
        _check(errors, params, "sleep", "chart_days",
               lambda v: _is_int(v) and v >= 1, "Must be a positive integer")

        return errors

    @staticmethod
    def validate_weight_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate weight tracker parameters."""
        errors: list[ValidationError] = []

        for name in ("min_kg", "max_kg", "min_height_cm", "max_height_cm"):
            _check(errors, params, "weight", name,
                   lambda v: _is_number(v) and v > 0, "Must be a positive number")

        for low_name, high_name in (("min_kg", "max_kg"), ("min_height_cm", "max_height_cm")):
            low, high = params.get(low_name), params.get(high_name)
            if _is_number(low) and _is_number(high) and low >= high:
                errors.append(ValidationError(
                    field=f"weight.{low_name}",
                    message=f"Must be below {high_name}",
                    value=low
                ))

        return errors

    @staticmethod
    def validate_journal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate mood journal parameters."""
        errors: list[ValidationError] = []

        _check(errors, params, "journal", "min_text_length",
               lambda v: _is_int(v) and v >= 0, "Must be a non-negative integer")
        _check(errors, params, "journal", "suggested_tag_count",
               lambda v: _is_int(v) and v >= 0, "Must be a non-negative integer")

        return errors

    @staticmethod
    def validate_suggestion_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate external language model parameters."""
        errors: list[ValidationError] = []

        for name in ("endpoint", "model", "api_key_env"):
            _check(errors, params, "suggestions", name,
                   lambda v: isinstance(v, str) and v.strip() != "", "Must be a non-empty string")
        _check(errors, params, "suggestions", "endpoint",
               lambda v: not isinstance(v, str) or v.startswith(("http://", "https://")),
               "Must be an http(s) URL")
        _check(errors, params, "suggestions", "api_key",
               lambda v: isinstance(v, str), "Must be a string")
        _check(errors, params, "suggestions", "timeout_seconds",
               lambda v: _is_number(v) and v > 0, "Must be a positive number")

        return errors

    @staticmethod
    def validate_storage_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate key-value store parameters."""
        errors: list[ValidationError] = []

        _check(errors, params, "storage", "backend",
               lambda v: v in STORAGE_BACKENDS, f"Must be one of {', '.join(STORAGE_BACKENDS)}")
        _check(errors, params, "storage", "db_path",
               lambda v: isinstance(v, str) and v.strip() != "", "Must be a non-empty string")

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors: list[ValidationError] = []

        _check(errors, params, "logging", "level",
               lambda v: isinstance(v, str) and v.upper() in LOG_LEVELS,
               f"Must be one of {', '.join(LOG_LEVELS)}")
        _check(errors, params, "logging", "format_json",
               lambda v: isinstance(v, bool), "Must be a boolean")

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any],
                        known_fields: Optional[dict[str, set]] = None) -> list[ValidationError]:
        """Validate complete configuration."""
        errors: list[ValidationError] = []

        for section, params in config.items():
            if section not in KNOWN_SECTIONS:
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=params
                ))
                continue
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            if known_fields and section in known_fields:
                for name in params:
                    if name not in known_fields[section]:
                        errors.append(ValidationError(
                            field=f"{section}.{name}",
                            message="Unknown configuration key",
                            value=params[name]
                        ))

        validators = {
            "breathing": ConfigValidator.validate_breathing_params,
            "water": ConfigValidator.validate_water_params,
            "sleep": ConfigValidator.validate_sleep_params,
            "weight": ConfigValidator.validate_weight_params,
            "journal": ConfigValidator.validate_journal_params,
            "suggestions": ConfigValidator.validate_suggestion_params,
            "storage": ConfigValidator.validate_storage_params,
            "logging": ConfigValidator.validate_logging_params,
        }

        for section in SEQUENCE_SECTIONS:
            if isinstance(config.get(section), dict):
                errors.extend(ConfigValidator.validate_sequence_params(config[section], section))

        for section, validate in validators.items():
            if isinstance(config.get(section), dict):
                errors.extend(validate(config[section]))

        return errors
