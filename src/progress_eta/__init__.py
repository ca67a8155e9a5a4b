"""Progress ETA - estimate the time remaining for long-running operations.

This package turns a monotonically non-decreasing "percentage complete"
signal, sampled over wall-clock time, into a stable estimate of the
seconds left until 100%.
"""

from progress_eta.core import (
    ConfigurationError,
    EnvironmentVariableError,
    EstimatorConfig,
    EstimatorLimits,
    ETAEstimator,
    MonotonicityViolationError,
    load_config,
)
from progress_eta.types import EstimateSnapshot, TimeSample

__all__ = [
    "ConfigurationError",
    "EnvironmentVariableError",
    "EstimateSnapshot",
    "EstimatorConfig",
    "EstimatorLimits",
    "ETAEstimator",
    "MonotonicityViolationError",
    "TimeSample",
    "load_config",
]
