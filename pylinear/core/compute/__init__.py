"""
Shared compute infrastructure for pylinear.

IMPORTANT: This is NOT where domain algorithms live. Those go in their
domain packages (matrix/, linsolve/, decomposition/). This module contains
shared NUMERIC infrastructure.

Submodules:
    tolerances: Zero thresholds, iteration caps, comparison tiers
    timing: Execution timing utilities
    formatting: Deterministic text rendering of values and traces
"""

from pylinear.core.compute.timing import Timer
from pylinear.core.compute.tolerances import (
    COFACTOR_MAX_SIZE,
    DEFAULT_MAX_ITERATIONS,
    ZERO_TOLERANCE,
    ToleranceTier,
    is_zero,
)
from pylinear.core.compute.formatting import (
    format_augmented,
    format_fixed,
    format_matrix,
    format_row,
    format_scalar,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "COFACTOR_MAX_SIZE",
    "DEFAULT_MAX_ITERATIONS",
    "ZERO_TOLERANCE",
    "ToleranceTier",
    "is_zero",
    # Formatting
    "format_augmented",
    "format_fixed",
    "format_matrix",
    "format_row",
    "format_scalar",
]
