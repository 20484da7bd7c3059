"""
Input validation utilities for pylinear.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.exceptions import DimensionError, ValidationError


def check_rectangular(grid: Any, name: str) -> None:
    """
    Verify a nested sequence has rows of equal length.

    numpy arrays are rectangular by construction and pass unchecked. Rows
    may be any sized objects (lists, tuples, 1D arrays). Ragged input is rejected rather than padded or truncated.

    Args:
        grid: Nested sequence (list of rows)
        name: Parameter name for error messages

    Raises:
        DimensionError: If any row length differs from the first row's
    """
    if isinstance(grid, np.ndarray) or not isinstance(grid, Sequence):
        return
    if len(grid) == 0:
        return

    lengths = []
    for row in grid:
        try:
            lengths.append(len(row))
        except TypeError:
            # Scalar rows: a flat sequence, left to the ndim checks
            return

    expected = lengths[0]
    for i, length in enumerate(lengths):
        if length != expected:
            raise DimensionError(
                f"{name}: ragged rows, row 0 has {expected} values "
                f"but row {i} has {length}",
                operation='construct',
                left_shape=(len(grid), expected),
            )


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The result never shares memory with the input.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array, copy=True)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, complex, etc.)
    if not (np.issubdtype(result.dtype, np.integer)
            or np.issubdtype(result.dtype, np.floating)
            or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            left_shape=tuple(array.shape),
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every axis of the array has at least one entry.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If any axis has length zero
    """
    if array.size == 0:
        raise ValidationError(
            f"{name}: requires at least one value along every axis, got shape {array.shape}"
        )


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Args:
        left: Shape of the first operand
        right: Shape of the second operand
        operation: Operation name for error messages

    Raises:
        DimensionError: If the shapes differ
    """
    if left != right:
        raise DimensionError(
            f"Cannot {operation} operands of different dimensions: "
            f"{_shape_str(left)} and {_shape_str(right)}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix shape is square.

    Args:
        shape: (rows, cols)
        operation: Operation name for error messages

    Raises:
        DimensionError: If rows != cols
    """
    if shape[0] != shape[1]:
        raise DimensionError(
            f"{operation} requires a square matrix, got {_shape_str(shape)}",
            operation=operation,
            left_shape=shape,
        )


def _shape_str(shape: tuple[int, ...]) -> str:
    """'3' for vectors, '2x3' for matrices."""
    return "x".join(str(s) for s in shape)
