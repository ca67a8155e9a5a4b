"""Tests for logging infrastructure and operation ID tracking."""

from __future__ import annotations

import logging
import logging.handlers
from collections.abc import Generator
from pathlib import Path

import pytest

from progress_eta.core.config import LoggingSettings, load_config
from progress_eta.utils.logging import (
    OperationIDFilter,
    clear_operation_id,
    configure_logging,
    configure_logging_from_settings,
    get_operation_id,
    operation_context,
    set_operation_id,
)


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Restore root logger handlers and level after a test reconfigures them."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def make_record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, message, None, None)


class TestOperationID:
    """Test suite for operation ID context handling."""

    def test_set_get_clear(self) -> None:
        """Test basic operation ID lifecycle."""
        assert get_operation_id() is None

        set_operation_id("install-1")
        assert get_operation_id() == "install-1"

        clear_operation_id()
        assert get_operation_id() is None

    def test_context_restores_previous(self) -> None:
        """Test the context manager restores the outer ID on exit."""
        set_operation_id("outer")

        with operation_context("inner") as operation_id:
            assert operation_id == "inner"
            assert get_operation_id() == "inner"

        assert get_operation_id() == "outer"

    def test_context_generates_id(self) -> None:
        """Test an ID is generated when none is given."""
        with operation_context() as operation_id:
            assert len(operation_id) == 32
            assert get_operation_id() == operation_id

        assert get_operation_id() is None

    def test_context_restores_on_error(self) -> None:
        """Test the ID is restored when the block raises."""
        with pytest.raises(RuntimeError):
            with operation_context("failing"):
                raise RuntimeError("boom")

        assert get_operation_id() is None


class TestOperationIDFilter:
    """Test suite for OperationIDFilter."""

    def test_adds_placeholder_outside_context(self) -> None:
        """Test records outside an operation get N/A."""
        record = make_record()

        assert OperationIDFilter().filter(record)
        assert getattr(record, "operation_id") == "N/A"

    def test_adds_current_id(self) -> None:
        """Test records carry the current operation ID."""
        record = make_record()

        with operation_context("download-7"):
            assert OperationIDFilter().filter(record)

        assert getattr(record, "operation_id") == "download-7"


class TestConfigureLogging:
    """Test suite for configure_logging."""

    @pytest.mark.usefixtures("restore_root_logger")
    def test_console_handler(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test console output includes the operation ID."""
        configure_logging(log_level="DEBUG", enable_syslog=False)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

        with operation_context("op-42"):
            logging.getLogger("progress_eta.test").debug("estimate ready")

        output = capsys.readouterr().out
        assert "[op-42]" in output
        assert "estimate ready" in output

    @pytest.mark.usefixtures("restore_root_logger")
    def test_replaces_existing_handlers(self) -> None:
        """Test repeated configuration does not duplicate handlers."""
        configure_logging(enable_syslog=False)
        configure_logging(enable_syslog=False)

        assert len(logging.getLogger().handlers) == 1

    @pytest.mark.usefixtures("restore_root_logger")
    def test_unknown_level_falls_back_to_info(self) -> None:
        """Test an unknown level name configures INFO."""
        configure_logging(log_level="chatty", enable_console=False)

        assert logging.getLogger().level == logging.INFO

    @pytest.mark.usefixtures("restore_root_logger")
    def test_unavailable_syslog_keeps_console(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a missing syslog socket never prevents console logging."""
        configure_logging(
            enable_syslog=True,
            syslog_address="/nonexistent/progress-eta/log",
            enable_console=True,
        )

        handlers = logging.getLogger().handlers
        assert any(type(h) is logging.StreamHandler for h in handlers)
        syslog_handlers = [h for h in handlers if isinstance(h, logging.handlers.SysLogHandler)]
        if not syslog_handlers:
            assert "Could not connect to syslog" in capsys.readouterr().err


class TestConfigureLoggingFromSettings:
    """Test suite for configure_logging_from_settings."""

    @pytest.mark.usefixtures("restore_root_logger")
    def test_applies_level_from_yaml(self, config_file: Path) -> None:
        """Test the logging section of a config file sets the root level."""
        _ = config_file.write_text("logging:\n  level: DEBUG\n")
        config = load_config(config_file)

        configure_logging_from_settings(config.logging)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    @pytest.mark.usefixtures("restore_root_logger")
    def test_applies_format(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test the configured format string is used for console output."""
        settings = LoggingSettings(level="WARNING", format="ETA %(levelname)s %(message)s")

        configure_logging_from_settings(settings)
        logging.getLogger("progress_eta.test").info("hidden")
        logging.getLogger("progress_eta.test").warning("shown")

        output = capsys.readouterr().out
        assert "ETA WARNING shown" in output
        assert "hidden" not in output

    @pytest.mark.usefixtures("restore_root_logger")
    def test_console_can_be_disabled(self) -> None:
        """Test no handlers are added when console and syslog are both off."""
        configure_logging_from_settings(LoggingSettings(), enable_console=False)

        assert logging.getLogger().handlers == []
