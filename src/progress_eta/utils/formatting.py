"""Pure formatting utilities for human-readable output.

This module provides stateless formatting functions for turning estimator
values into display strings. All functions are pure with no side effects.
"""

# Time unit constants
_MINUTE = 60
_HOUR = _MINUTE * 60  # 3,600
_DAY = _HOUR * 24  # 86,400


def format_duration(seconds: float) -> str:
    """Convert seconds to human-readable duration format.

    Automatically selects appropriate time units based on magnitude.
    Shows the two most significant units for values over 1 minute.

    Args:
        seconds: Duration in seconds (must be non-negative)

    Returns:
        Human-readable duration string with adaptive granularity.
        - Days: "Xd Yh" (shows days and remaining hours)
        - Hours: "Xh Ym" (shows hours and remaining minutes)
        - Minutes: "Xm Ys" (shows minutes and remaining seconds)
        - Seconds: "Xs" (shows seconds only)

    Examples:
        >>> format_duration(45)
        '45s'
        >>> format_duration(90)
        '1m 30s'
        >>> format_duration(3665)
        '1h 1m'
        >>> format_duration(90000)
        '1d 1h'

    Note:
        Rounds down to whole units. Zero-valued trailing units are
        omitted (e.g., "1h 0m" becomes "1h").
    """
    if seconds < 0:
        msg = "seconds must be non-negative"
        raise ValueError(msg)

    total_seconds = int(seconds)

    if total_seconds >= _DAY:
        days, remaining = divmod(total_seconds, _DAY)
        hours = remaining // _HOUR
        return f"{days}d {hours}h" if hours > 0 else f"{days}d"

    if total_seconds >= _HOUR:
        hours, remaining = divmod(total_seconds, _HOUR)
        minutes = remaining // _MINUTE
        return f"{hours}h {minutes}m" if minutes > 0 else f"{hours}h"

    if total_seconds >= _MINUTE:
        minutes, remaining = divmod(total_seconds, _MINUTE)
        return f"{minutes}m {remaining}s" if remaining > 0 else f"{minutes}m"

    return f"{total_seconds}s"


def format_elapsed_ms(milliseconds: int) -> str:
    """Convert elapsed milliseconds to human-readable duration format.

    Args:
        milliseconds: Elapsed time in milliseconds (must be non-negative)

    Returns:
        Duration string as produced by format_duration

    Examples:
        >>> format_elapsed_ms(1500)
        '1s'
        >>> format_elapsed_ms(125_000)
        '2m 5s'
    """
    if milliseconds < 0:
        msg = "milliseconds must be non-negative"
        raise ValueError(msg)

    return format_duration(milliseconds // 1000)
