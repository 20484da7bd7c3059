"""
Deterministic text rendering of numeric values.

The presentation layer and golden-output tests depend on these exact
formats:
    - matrices and vectors: each row as '[v1, v2, ...]', 3 decimals
    - elimination traces: each value right-aligned in an 8-character
      field at 3 decimals, space separated, one bracketed row per line
    - scalar results: 6 decimals
"""

from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Any, Iterable

import numpy as np
from numpy.typing import NDArray

MATRIX_DECIMALS = 3
SCALAR_DECIMALS = 6
AUGMENTED_FIELD_WIDTH = 8

# Exact decimal expansion of any finite float64 fits in this precision
_DECIMAL_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def format_fixed(value: float, decimals: int = MATRIX_DECIMALS) -> str:
    """
    Fixed-point rendering with ties rounded away from zero.

    The rounding applies to the exact binary value of the float, so
    0.0625 renders as 0.063 at 3 decimals. Negative zero prints without
    a sign.
    """
    value = float(value)
    if value == 0.0:
        value = 0.0
    quantum = Decimal(1).scaleb(-decimals)
    rounded = Decimal(value).quantize(quantum, context=_DECIMAL_CONTEXT)
    return format(rounded, "f")


def format_scalar(value: float) -> str:
    """Render a scalar result (distance, determinant, angle...) to 6 decimals."""
    return format_fixed(value, SCALAR_DECIMALS)


def format_row(values: Iterable[float], decimals: int = MATRIX_DECIMALS) -> str:
    """Render one row as '[v1, v2, ...]'."""
    return "[" + ", ".join(format_fixed(v, decimals) for v in values) + "]"


def format_matrix(rows: NDArray[np.floating[Any]] | Iterable[Iterable[float]]) -> str:
    """Render a 2D grid, one '[v1, v2, ...]' row per line."""
    return "\n".join(format_row(row) for row in rows)


def format_augmented(rows: NDArray[np.floating[Any]] | Iterable[Iterable[float]]) -> str:
    """
    Render an augmented matrix for an elimination step trace.

    Each value is fixed to 3 decimals and right-aligned in an 8-character
    field; values are joined by a single space.
    """
    return "\n".join(
        "[" + " ".join(
            format_fixed(v).rjust(AUGMENTED_FIELD_WIDTH) for v in row
        ) + "]"
        for row in rows
    )
