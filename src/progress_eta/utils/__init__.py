"""Shared utility modules.

This package provides:
- Duration formatting (seconds and milliseconds to human-readable)
- Logging infrastructure (operation ID tracking, syslog integration)
"""

from progress_eta.utils.formatting import (
    format_duration,
    format_elapsed_ms,
)
from progress_eta.utils.logging import (
    configure_logging,
    configure_logging_from_settings,
    get_operation_id,
    operation_context,
    set_operation_id,
    clear_operation_id,
)

__all__ = [
    # Formatting utilities
    "format_duration",
    "format_elapsed_ms",
    # Logging
    "clear_operation_id",
    "configure_logging",
    "configure_logging_from_settings",
    "get_operation_id",
    "operation_context",
    "set_operation_id",
]
