"""Protocol definitions for component interfaces.

This module defines structural subtyping protocols that establish
contracts for the estimator and its collaborators without requiring
inheritance.
"""

from typing import Protocol, runtime_checkable


class TimeSource(Protocol):
    """Zero-argument callable returning monotonic time in seconds.

    time.monotonic satisfies this protocol; tests substitute a fake
    source to simulate the passage of time.
    """

    def __call__(self) -> float: ...


@runtime_checkable
class ProgressEstimator(Protocol):
    """Protocol for remaining-time estimators.

    Defines the interface a progress-reporting layer relies on: feed it
    percentages as they are observed and poll it for display values.
    """

    def reset(self) -> None:
        """Start tracking a new operation."""
        ...

    def add_data(self, percentage: int) -> bool:
        """Record a percentage observation.

        Args:
            percentage: Percentage complete at the time of the call

        Returns:
            False if the percentage decreased, True otherwise
        """
        ...

    def get_elapsed(self) -> int:
        """Return milliseconds elapsed since the last reset."""
        ...

    def get_remaining(self) -> int:
        """Return estimated seconds to completion, or 0 if unknown."""
        ...
