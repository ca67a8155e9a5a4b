"""Data models for progress-eta.

This module defines immutable dataclasses used throughout the package
for type-safe data transfer between components.
"""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class TimeSample:
    """A single progress observation.

    Records the percentage complete at a point in time measured in
    milliseconds since the tracked operation started.
    """

    elapsed_ms: int
    percentage: int


@dataclass(slots=True, frozen=True)
class EstimateSnapshot:
    """Point-in-time view of an estimator for display.

    A remaining_seconds of 0 means no usable estimate; remaining_display
    is None in that case.
    """

    percentage: int
    elapsed_ms: int
    elapsed_display: str
    remaining_seconds: int
    remaining_display: str | None
