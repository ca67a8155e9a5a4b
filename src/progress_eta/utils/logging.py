"""Logging infrastructure with syslog integration and operation ID tracking.

Every tracked operation can carry an operation ID held in a ContextVar.
A logging filter stamps it on each record so the diagnostic trace of one
estimator can be told apart from another's in shared log output.
"""

import contextvars
import logging
import logging.handlers
import sys
import uuid
from collections.abc import Generator
from contextlib import contextmanager
from typing import Final, override

from progress_eta.core.config import DEFAULT_LOG_FORMAT, LoggingSettings

operation_id_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation_id",
    default=None,
)

SYSLOG_LOG_FORMAT: Final[str] = "progress-eta[%(process)d]: %(levelname)s - [%(operation_id)s] - %(name)s - %(message)s"

DEFAULT_SYSLOG_ADDRESS: Final[str] = "/dev/log"


class OperationIDFilter(logging.Filter):
    """Logging filter that adds the operation ID to log records.

    Records logged outside an operation context get "N/A".
    """

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        """Add operation ID to log record from ContextVar.

        Args:
            record: Log record to enhance with the operation ID

        Returns:
            True to allow the record to be logged
        """
        operation_id = operation_id_var.get()
        record.operation_id = operation_id if operation_id is not None else "N/A"
        return True


def configure_logging(
    *,
    log_level: str = "INFO",
    enable_syslog: bool = False,
    syslog_address: str = DEFAULT_SYSLOG_ADDRESS,
    enable_console: bool = True,
    log_format: str = DEFAULT_LOG_FORMAT,
) -> None:
    """Configure root logging with operation ID tracking.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_syslog: Enable syslog handler
        syslog_address: Syslog socket address
        enable_console: Enable console output handler
        log_format: Format string for console output

    Example:
        >>> configure_logging(log_level="DEBUG")
        >>> with operation_context("install-42"):
        ...     estimator.get_remaining()
    """
    root_logger = logging.getLogger()

    level = getattr(logging, log_level.upper(), logging.INFO)  # pyright: ignore[reportAny]
    root_logger.setLevel(level)  # pyright: ignore[reportAny]

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    operation_filter = OperationIDFilter()

    if enable_syslog:
        try:
            syslog_handler = logging.handlers.SysLogHandler(
                address=syslog_address,
                facility=logging.handlers.SysLogHandler.LOG_DAEMON,
            )
            syslog_handler.setFormatter(logging.Formatter(SYSLOG_LOG_FORMAT))
            syslog_handler.addFilter(operation_filter)
            root_logger.addHandler(syslog_handler)
        except OSError as exc:
            # Syslog not available (e.g., development environment)
            print(
                f"Warning: Could not connect to syslog at {syslog_address}: {exc}",
                file=sys.stderr,
            )

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(log_format))
        console_handler.addFilter(operation_filter)
        root_logger.addHandler(console_handler)


def configure_logging_from_settings(
    settings: LoggingSettings,
    *,
    syslog_address: str = DEFAULT_SYSLOG_ADDRESS,
    enable_console: bool = True,
) -> None:
    """Configure root logging from the logging section of a loaded config.

    Args:
        settings: Validated logging settings
        syslog_address: Syslog socket address
        enable_console: Enable console output handler
    """
    configure_logging(
        log_level=settings.level,
        enable_syslog=settings.syslog_enabled,
        syslog_address=syslog_address,
        enable_console=enable_console,
        log_format=settings.format,
    )


def set_operation_id(operation_id: str) -> None:
    """Set the operation ID for the current context."""
    _ = operation_id_var.set(operation_id)


def get_operation_id() -> str | None:
    """Get the current operation ID from context.

    Returns:
        Current operation ID or None if not set
    """
    return operation_id_var.get()


def clear_operation_id() -> None:
    """Clear the operation ID from the current context."""
    _ = operation_id_var.set(None)


@contextmanager
def operation_context(operation_id: str | None = None) -> Generator[str, None, None]:
    """Context manager for temporarily setting the operation ID.

    Args:
        operation_id: The operation ID to set (a uuid4 hex string is generated if None)

    Yields:
        The operation ID in effect inside the block
    """
    effective_id = operation_id if operation_id is not None else uuid.uuid4().hex
    token = operation_id_var.set(effective_id)
    try:
        yield effective_id
    finally:
        operation_id_var.reset(token)
