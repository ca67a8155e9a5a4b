"""Type definitions and protocols for progress-eta.

This package provides:
- Data models (immutable dataclasses)
- Protocol definitions (structural subtyping interfaces)
- Type aliases (PEP 695 modern syntax)
"""

from progress_eta.types.aliases import (
    Gradient,
    RawConfig,
    SamplePair,
)
from progress_eta.types.models import (
    EstimateSnapshot,
    TimeSample,
)
from progress_eta.types.protocols import (
    ProgressEstimator,
    TimeSource,
)

__all__ = [
    # Type aliases
    "Gradient",
    "RawConfig",
    "SamplePair",
    # Data models
    "EstimateSnapshot",
    "TimeSample",
    # Protocols
    "ProgressEstimator",
    "TimeSource",
]
