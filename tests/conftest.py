"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Generator
from pathlib import Path

import pytest

from progress_eta.core.progress.eta_estimator import ETAEstimator
from progress_eta.utils.logging import clear_operation_id
from tests.fixtures.time_sources import FakeTimeSource


@pytest.fixture
def fake_time() -> FakeTimeSource:
    """Provide a fake monotonic time source satisfying the TimeSource protocol."""
    return FakeTimeSource()


@pytest.fixture
def estimator(fake_time: FakeTimeSource) -> ETAEstimator:
    """Provide an estimator driven by the fake time source."""
    return ETAEstimator(time_source=fake_time)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Provide a path for a configuration file inside a temporary directory."""
    return tmp_path / "progress-eta.yaml"


@pytest.fixture(autouse=True)
def _reset_operation_id() -> Generator[None, None, None]:
    """Ensure no operation ID leaks between tests."""
    clear_operation_id()
    yield
    clear_operation_id()
