"""Append-only chronological log of progress samples."""

from __future__ import annotations

from collections.abc import Iterator

from progress_eta.types.aliases import SamplePair
from progress_eta.types.models import TimeSample


class MonotonicityViolationError(ValueError):
    """Raised when a sample would make the percentage go down."""

    percentage: int
    last_percentage: int

    def __init__(self, percentage: int, last_percentage: int) -> None:
        """Initialize MonotonicityViolationError.

        Args:
            percentage: The rejected percentage
            last_percentage: The last accepted percentage
        """
        super().__init__(
            f"Percentage cannot go down: got {percentage}, last accepted {last_percentage}"
        )
        self.percentage = percentage
        self.last_percentage = last_percentage


class SampleLog:
    """Ordered (elapsed time, percentage) observations for one tracked operation.

    Samples are kept in insertion order, which is chronological. The
    percentage never decreases across the log: a sample that would break
    this is rejected and the log is left untouched.
    """

    _samples: list[TimeSample]
    _last_percentage: int

    def __init__(self) -> None:
        """Initialize an empty log."""
        self._samples = []
        self._last_percentage = 0

    def append(self, percentage: int, elapsed_ms: int) -> TimeSample:
        """Record a new sample.

        Args:
            percentage: Percentage complete
            elapsed_ms: Milliseconds since the operation started

        Returns:
            The recorded sample

        Raises:
            MonotonicityViolationError: If percentage is below the last accepted one
        """
        if percentage < self._last_percentage:
            raise MonotonicityViolationError(percentage, self._last_percentage)

        sample = TimeSample(elapsed_ms=elapsed_ms, percentage=percentage)
        self._samples.append(sample)
        self._last_percentage = percentage
        return sample

    def clear(self) -> None:
        """Remove all samples and forget the last accepted percentage."""
        self._samples.clear()
        self._last_percentage = 0

    @property
    def last_percentage(self) -> int:
        """Last accepted percentage (0 when the log is empty)."""
        return self._last_percentage

    @property
    def newest(self) -> TimeSample | None:
        """Most recently appended sample, if any."""
        return self._samples[-1] if self._samples else None

    @property
    def samples(self) -> tuple[TimeSample, ...]:
        """Snapshot of all samples in chronological order."""
        return tuple(self._samples)

    def iter_pairs_newest_first(self) -> Iterator[SamplePair]:
        """Yield consecutive (older, newer) pairs starting from the newest."""
        for i in range(len(self._samples) - 1, 0, -1):
            yield self._samples[i - 1], self._samples[i]

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[TimeSample]:
        return iter(self._samples)

    def __getitem__(self, index: int) -> TimeSample:
        return self._samples[index]
