"""ETA (Estimated Time of Arrival) estimation from percentage samples."""

from __future__ import annotations

import logging
import math
from typing import Final

from pydantic import ValidationError

from progress_eta.core.config import EstimatorConfig, EstimatorLimits
from progress_eta.types.aliases import Gradient
from progress_eta.types.models import EstimateSnapshot, TimeSample
from progress_eta.types.protocols import TimeSource
from progress_eta.utils.formatting import format_duration, format_elapsed_ms

from .clock import ElapsedClock
from .sample_log import MonotonicityViolationError, SampleLog

logger = logging.getLogger(__name__)

# Plausibility bounds for a gradient, in percentage points per millisecond.
# Below the floor the segment is stalled; above the ceiling the time delta
# was too small to measure meaningfully.
GRADIENT_MIN: Final[float] = 0.00001
GRADIENT_MAX: Final[float] = 100.0


def calculate_gradient(older: TimeSample, newer: TimeSample) -> Gradient | None:
    """Calculate the progress rate between two consecutive samples.

    Args:
        older: Earlier sample
        newer: Later sample

    Returns:
        Percentage points per millisecond, or None if no time passed between the samples
    """
    dx = newer.elapsed_ms - older.elapsed_ms
    if dx <= 0:
        return None
    dy = newer.percentage - older.percentage
    return dy / dx


class ETAEstimator:
    """Remaining-time estimator for a single monotonic percentage stream.

    Feed it percentages with ``add_data`` as progress is observed and poll
    ``get_remaining`` for the number of seconds left. The estimate is the
    remaining percentage divided by the average of the most recent
    plausible gradients; it is recomputed from the sample log on every call.

    A result of 0 means "no usable estimate": too few samples, too few
    plausible gradients, or an estimate outside the configured value limits.
    """

    clock: ElapsedClock
    log: SampleLog
    _limits: EstimatorLimits

    def __init__(
        self,
        time_source: TimeSource | None = None,
        limits: EstimatorLimits | None = None,
    ) -> None:
        """Initialize the estimator.

        Args:
            time_source: Monotonic seconds source (uses time.monotonic if None)
            limits: Initial limits, in effect until the next reset
        """
        self.clock = ElapsedClock(time_source)
        self.log = SampleLog()
        self._limits = EstimatorLimits()
        self.reset()
        if limits is not None:
            self._limits = limits.model_copy()

    @classmethod
    def from_config(cls, config: EstimatorConfig, time_source: TimeSource | None = None) -> ETAEstimator:
        """Create an estimator whose initial limits come from configuration.

        Args:
            config: Loaded estimator configuration
            time_source: Monotonic seconds source (uses time.monotonic if None)

        Returns:
            New estimator instance
        """
        return cls(time_source=time_source, limits=config.limits)

    @property
    def limits(self) -> EstimatorLimits:
        """Copy of the limits currently in effect."""
        return self._limits.model_copy()

    @property
    def samples(self) -> tuple[TimeSample, ...]:
        """Recorded samples in chronological order."""
        return self.log.samples

    @property
    def last_percentage(self) -> int:
        """Last accepted percentage."""
        return self.log.last_percentage

    @property
    def time_offset(self) -> int:
        """Milliseconds added to the measured elapsed time."""
        return self.clock.offset_ms

    @time_offset.setter
    def time_offset(self, value: int) -> None:
        self.clock.offset_ms = value

    def reset(self) -> None:
        """Start tracking a new operation.

        Clears the samples, the last percentage and the time offset,
        restarts the clock and restores the default limits. Limits set
        before the reset are discarded.
        """
        self._limits = EstimatorLimits()
        self.clock.reset()
        self.log.clear()

    def set_average_limits(self, average_min: int, average_max: int) -> bool:
        """Set how many accepted gradients are required and used.

        Args:
            average_min: The smallest number of gradients to average
            average_max: The largest number of recent gradients to average

        Returns:
            True if the limits were applied
        """
        return self._update_limits(average_min=average_min, average_max=average_max)

    def set_value_limits(self, value_min: int, value_max: int) -> bool:
        """Set the plausible range for estimates.

        Args:
            value_min: The smallest acceptable estimate in seconds
            value_max: The largest acceptable estimate in seconds

        Returns:
            True if the limits were applied
        """
        return self._update_limits(value_min_seconds=value_min, value_max_seconds=value_max)

    def get_elapsed(self) -> int:
        """Get milliseconds elapsed since the last reset, including the offset."""
        return self.clock.elapsed_ms()

    def add_data(self, percentage: int) -> bool:
        """Record the percentage complete at the current elapsed time.

        Args:
            percentage: Percentage complete

        Returns:
            False if the percentage went down (nothing is recorded), True otherwise
        """
        try:
            sample = self.log.append(percentage, self.get_elapsed())
        except MonotonicityViolationError as e:
            logger.warning("percentage cannot go down: %s", e)
            return False

        logger.debug("adding %i at %i (ms)", sample.percentage, sample.elapsed_ms)
        return True

    def get_remaining(self) -> int:
        """Estimate the seconds remaining until 100%.

        Returns:
            Whole seconds remaining, or 0 if there is no usable estimate
        """
        length = len(self.log)
        if length < 2:
            logger.debug("array too small")
            return 0

        limits = self._limits
        examined = 0
        averaged = 0
        grad_total = 0.0

        for older, newer in self.log.iter_pairs_newest_first():
            if averaged >= limits.average_max:
                break
            if limits.max_scan_depth is not None and examined >= limits.max_scan_depth:
                logger.debug("scan depth %i reached", examined)
                break
            examined += 1

            gradient = calculate_gradient(older, newer)
            if gradient is None or not GRADIENT_MIN <= gradient <= GRADIENT_MAX:
                logger.debug("ignoring gradient at %i (ms): %s", newer.elapsed_ms, gradient)
                continue

            logger.debug("gradient at %i (ms)=%f", newer.elapsed_ms, gradient)
            grad_total += gradient
            averaged += 1

        logger.debug("averaged %i points", averaged)
        if averaged == 0 or averaged < limits.average_min:
            logger.debug("not enough samples for accurate time: %i", averaged)
            return 0

        grad_ave = grad_total / averaged
        logger.debug("grad_ave=%f", grad_ave)

        newest = self.log[-1]
        percentage_left = 100 - newest.percentage
        estimated = percentage_left / grad_ave / 1000
        logger.debug("percentage_left=%i, estimated=%f seconds", percentage_left, estimated)

        if not limits.value_min_seconds <= estimated <= limits.value_max_seconds:
            logger.debug(
                "estimate %f outside [%i, %i], ignoring",
                estimated,
                limits.value_min_seconds,
                limits.value_max_seconds,
            )
            return 0

        return math.floor(estimated)

    def get_snapshot(self) -> EstimateSnapshot:
        """Get the current percentage, elapsed time and estimate for display.

        Returns:
            EstimateSnapshot with a formatted remaining time when an estimate exists
        """
        remaining = self.get_remaining()
        elapsed = self.get_elapsed()
        return EstimateSnapshot(
            percentage=self.log.last_percentage,
            elapsed_ms=elapsed,
            elapsed_display=format_elapsed_ms(elapsed),
            remaining_seconds=remaining,
            remaining_display=format_duration(remaining) if remaining > 0 else None,
        )

    def _update_limits(self, **changes: int) -> bool:
        """Validate and apply a partial limits update."""
        try:
            self._limits = EstimatorLimits.model_validate(self._limits.model_dump() | changes)
        except ValidationError as e:
            logger.warning("rejected limits %s: %s", changes, e)
            return False
        return True
