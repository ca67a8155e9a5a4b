"""Progress tracking module for computing remaining-time estimates."""

from __future__ import annotations

from .clock import ElapsedClock
from .sample_log import (
    MonotonicityViolationError,
    SampleLog,
)
from .eta_estimator import (
    GRADIENT_MAX,
    GRADIENT_MIN,
    ETAEstimator,
    calculate_gradient,
)

__all__ = [
    "ElapsedClock",
    "MonotonicityViolationError",
    "SampleLog",
    "GRADIENT_MAX",
    "GRADIENT_MIN",
    "ETAEstimator",
    "calculate_gradient",
]
