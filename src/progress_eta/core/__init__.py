"""Core estimation logic and configuration."""

from __future__ import annotations

from .config import (
    ConfigurationError,
    EnvironmentVariableError,
    EstimatorConfig,
    EstimatorLimits,
    LoggingSettings,
    load_config,
)
from .progress import (
    ElapsedClock,
    ETAEstimator,
    MonotonicityViolationError,
    SampleLog,
)

__all__ = [
    "ConfigurationError",
    "EnvironmentVariableError",
    "EstimatorConfig",
    "EstimatorLimits",
    "LoggingSettings",
    "load_config",
    "ElapsedClock",
    "ETAEstimator",
    "MonotonicityViolationError",
    "SampleLog",
]
