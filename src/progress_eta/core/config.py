"""Configuration system for progress-eta.

This module implements the estimator configuration schema using Pydantic
for validation, with support for environment variable resolution and
fail-fast validation with actionable error messages.
"""

import os
import re
from pathlib import Path
from typing import Annotated, Final, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from progress_eta.types.aliases import RawConfig

# Regular expression pattern for environment variable references
# Matches ${VARIABLE_NAME} syntax where VARIABLE_NAME can contain letters, digits, and underscores
ENV_VAR_PATTERN: Final[re.Pattern[str]] = re.compile(r"\$\{([A-Z0-9_]+)\}")

DEFAULT_AVERAGE_MIN: Final[int] = 4  # samples
DEFAULT_AVERAGE_MAX: Final[int] = 10  # samples
DEFAULT_VALUE_MIN_SECONDS: Final[int] = 5
DEFAULT_VALUE_MAX_SECONDS: Final[int] = 60 * 60

DEFAULT_LOG_FORMAT: Final[str] = "%(asctime)s - %(name)s - %(levelname)s - [%(operation_id)s] - %(message)s"


class BaseConfig(BaseModel):
    """Base configuration model with common settings."""

    model_config: ConfigDict = ConfigDict(  # pyright: ignore[reportIncompatibleVariableOverride]
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
        frozen=False,
    )


class EstimatorLimits(BaseConfig):
    """Bounds applied by the remaining-time estimator.

    The average limits bound how many accepted gradients are required and
    used; the value limits bound the plausible output range in seconds.
    Estimates outside the value range are reported as "no estimate".
    """

    average_min: Annotated[
        int,
        Field(
            ge=0,
            description="Smallest number of accepted gradients needed for an estimate",
        ),
    ] = DEFAULT_AVERAGE_MIN
    average_max: Annotated[
        int,
        Field(
            ge=0,
            description="Largest number of accepted gradients to average",
        ),
    ] = DEFAULT_AVERAGE_MAX
    value_min_seconds: Annotated[
        int,
        Field(
            ge=0,
            description="Smallest plausible estimate in seconds",
        ),
    ] = DEFAULT_VALUE_MIN_SECONDS
    value_max_seconds: Annotated[
        int,
        Field(
            ge=0,
            description="Largest plausible estimate in seconds",
        ),
    ] = DEFAULT_VALUE_MAX_SECONDS
    max_scan_depth: Annotated[
        int | None,
        Field(
            gt=0,
            description="Maximum sample pairs examined per estimate (null for unbounded)",
        ),
    ] = None


class LoggingSettings(BaseConfig):
    """Configuration for logging."""

    level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        Field(description="Log level"),
    ] = "INFO"
    syslog_enabled: Annotated[
        bool,
        Field(description="Enable syslog integration"),
    ] = False
    format: Annotated[
        str,
        Field(min_length=1, description="Log format string"),
    ] = DEFAULT_LOG_FORMAT


class EstimatorConfig(BaseConfig):
    """Top-level configuration schema.

    Aggregates the configuration sections:
    - limits: Initial estimator limits
    - logging: Logging settings
    """

    limits: Annotated[
        EstimatorLimits,
        Field(description="Initial estimator limits"),
    ] = EstimatorLimits()
    logging: Annotated[
        LoggingSettings,
        Field(description="Logging settings"),
    ] = LoggingSettings()


class EnvironmentVariableError(Exception):
    """Exception raised when environment variable resolution fails."""


class ConfigurationError(Exception):
    """Exception raised when configuration loading or validation fails.

    Carries a detailed, actionable message covering file not found,
    YAML parsing errors, and validation failures.
    """


def resolve_env_var(value: str) -> str:
    """Resolve environment variable references in a string value.

    Args:
        value: String potentially containing ${VARIABLE_NAME} references

    Returns:
        String with environment variables resolved

    Raises:
        EnvironmentVariableError: If a referenced environment variable is missing

    Examples:
        >>> os.environ["ETA_MAX"] = "600"
        >>> resolve_env_var("${ETA_MAX}")
        '600'
    """

    def replace_match(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)

        if env_value is None:
            msg = (
                f"Required environment variable '{var_name}' is not set. "
                f"Please set this variable before loading the configuration."
            )
            raise EnvironmentVariableError(msg)

        return env_value

    return ENV_VAR_PATTERN.sub(replace_match, value)


def resolve_env_vars_in_dict(data: RawConfig) -> dict[str, object]:
    """Recursively resolve environment variables in a dictionary.

    Traverses nested dictionaries and lists, resolving environment variable
    references in string values. Non-string values are preserved as-is.

    Args:
        data: Dictionary potentially containing environment variable references

    Returns:
        New dictionary with environment variables resolved

    Raises:
        EnvironmentVariableError: If a referenced environment variable is missing
    """
    result: dict[str, object] = {}

    for key, value in data.items():
        if isinstance(value, str):
            result[key] = resolve_env_var(value)
        elif isinstance(value, dict):
            result[key] = resolve_env_vars_in_dict(value)  # pyright: ignore[reportUnknownArgumentType]  # YAML boundary
        elif isinstance(value, list):
            resolved_list: list[object] = []
            for item in value:  # pyright: ignore[reportUnknownVariableType]  # YAML list items
                if isinstance(item, str):
                    resolved_list.append(resolve_env_var(item))
                elif isinstance(item, dict):
                    resolved_list.append(resolve_env_vars_in_dict(item))  # pyright: ignore[reportUnknownArgumentType]  # YAML boundary
                else:
                    resolved_list.append(item)  # pyright: ignore[reportUnknownArgumentType]  # YAML primitives
            result[key] = resolved_list
        else:
            result[key] = value

    return result


def load_config(config_path: Path) -> EstimatorConfig:
    """Load and validate estimator configuration from a YAML file.

    Args:
        config_path: Path to the configuration YAML file

    Returns:
        Validated EstimatorConfig instance

    Raises:
        ConfigurationError: If the file cannot be loaded, resolved or validated
    """
    if not config_path.exists():
        msg = (
            f"Configuration file not found: {config_path}\n"
            f"Please create a configuration file at this location."
        )
        raise ConfigurationError(msg)

    try:
        with config_path.open("r", encoding="utf-8") as f:
            raw_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]  # YAML boundary
    except yaml.YAMLError as e:
        msg = (
            f"Failed to parse YAML configuration file: {config_path}\n"
            f"YAML parsing error: {e}\n"
            f"Please check the file for syntax errors."
        )
        raise ConfigurationError(msg) from e
    except OSError as e:
        msg = f"Failed to read configuration file: {config_path}\nError: {e}\nPlease check file permissions."
        raise ConfigurationError(msg) from e

    # An empty file means "all defaults"
    if raw_data is None:
        raw_data = {}

    if not isinstance(raw_data, dict):
        msg = (
            f"Invalid configuration file format: {config_path}\n"
            f"Expected YAML dictionary at root level, got: {type(raw_data).__name__}\n"
            f"Configuration file must contain key-value pairs."
        )
        raise ConfigurationError(msg)

    try:
        resolved_data = resolve_env_vars_in_dict(raw_data)  # pyright: ignore[reportUnknownArgumentType]  # YAML boundary
    except EnvironmentVariableError as e:
        msg = (
            f"Environment variable resolution failed in: {config_path}\n"
            f"{e}\n"
            f"Set the required environment variable before loading the configuration."
        )
        raise ConfigurationError(msg) from e

    try:
        config = EstimatorConfig.model_validate(resolved_data)
    except ValidationError as e:
        error_lines = ["Configuration validation failed:", ""]
        for error in e.errors():
            field_path = " → ".join(str(loc) for loc in error["loc"])
            error_lines.append(f"  Field: {field_path}")
            error_lines.append(f"  Error: {error['msg']}")
            error_lines.append(f"  Type: {error['type']}")
            error_lines.append("")

        error_lines.append(f"Configuration file: {config_path}")
        error_lines.append("Please fix the above errors and try again.")

        raise ConfigurationError("\n".join(error_lines)) from e

    return config
