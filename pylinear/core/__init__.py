"""
Core infrastructure for pylinear.

This module provides shared abstractions and utilities used by all
domain-specific submodules (vector, matrix, linsolve, decomposition,
geometry).

Key components:
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Tolerances, timing, text formatting
"""

from pylinear.core.result import Result
from pylinear.core.exceptions import (
    PyLinearError,
    ValidationError,
    DimensionError,
    UnsupportedOperationError,
    NumericalError,
    DegenerateInputError,
    SingularMatrixError,
    ConvergenceError,
)

__all__ = [
    # Result
    "Result",
    # Exceptions
    "PyLinearError",
    "ValidationError",
    "DimensionError",
    "UnsupportedOperationError",
    "NumericalError",
    "DegenerateInputError",
    "SingularMatrixError",
    "ConvergenceError",
]
