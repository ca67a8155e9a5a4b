"""Type aliases using modern PEP 695 syntax.

This module defines type aliases for common type patterns throughout
the package, using Python 3.13+ type statement syntax.
"""

from collections.abc import Mapping

from progress_eta.types.models import TimeSample

# Gradient in percentage points per millisecond
type Gradient = float

# Consecutive sample pair as (older, newer)
type SamplePair = tuple[TimeSample, TimeSample]

# Raw YAML data before pydantic validation
type RawConfig = Mapping[str, object]
