"""Monotonic elapsed-time source with a caller-adjustable offset."""

from __future__ import annotations

import time

from progress_eta.types.protocols import TimeSource


class ElapsedClock:
    """Millisecond stopwatch measuring time since the last reset.

    The offset accounts for time that passed outside this process, for
    example when a tracked operation is resumed. Callers adjust it by
    assigning to ``offset_ms`` directly; only ``reset`` clears it.
    """

    time_source: TimeSource
    offset_ms: int
    _base: float

    def __init__(self, time_source: TimeSource | None = None) -> None:
        """Initialize the clock and start measuring.

        Args:
            time_source: Monotonic seconds source (uses time.monotonic if None)
        """
        self.time_source = time_source if time_source is not None else time.monotonic
        self.offset_ms = 0
        self._base = self.time_source()

    def elapsed_ms(self) -> int:
        """Get elapsed milliseconds since the last reset, including the offset.

        A negative offset larger than the measured time yields 0.

        Returns:
            Whole milliseconds elapsed, never negative
        """
        elapsed = (self.time_source() - self._base) * 1000.0
        return max(0, int(elapsed + self.offset_ms))

    def reset(self) -> None:
        """Rebase the clock to now and zero the offset."""
        self._base = self.time_source()
        self.offset_ms = 0
