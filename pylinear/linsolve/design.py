"""
Linear system design.

LinearSystemDesign holds the validated coefficient matrix A (n x n) and
constants b (n,) of the system A x = b. It is the boundary: inputs are
validated here, and backends trust it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.exceptions import DimensionError
from pylinear.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_finite,
    check_not_empty,
    check_rectangular,
    check_square,
)
from pylinear.matrix import Matrix
from pylinear.vector import Vector


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Square linear system specification.

    Immutable after construction. Accessors return copies so backends can
    eliminate in place without touching the design.

    Construction:
        LinearSystemDesign.build([[2, 1], [1, 3]], [3, 5])
        LinearSystemDesign.build(Matrix(...), Vector(...))
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _n: int

    @classmethod
    def build(
        cls,
        coefficients: ArrayLike | Matrix,
        constants: ArrayLike | Vector,
    ) -> LinearSystemDesign:
        """
        Validate inputs and build the design.

        Args:
            coefficients: n x n grid or Matrix
            constants: length-n sequence or Vector

        Raises:
            ValidationError: If inputs are non-numeric, empty or non-finite
            DimensionError: If A is not square or b has the wrong length
        """
        if isinstance(coefficients, Matrix):
            A = coefficients.to_numpy()
        else:
            check_rectangular(coefficients, 'coefficients')
            A = check_array(coefficients, 'coefficients')
        if isinstance(constants, Vector):
            b = constants.to_numpy()
        else:
            b = check_array(constants, 'constants')

        # Column vector constants are accepted
        if b.ndim == 2 and b.shape[1] == 1:
            b = b.ravel()

        check_2d(A, 'coefficients')
        check_1d(b, 'constants')
        check_not_empty(A, 'coefficients')
        check_finite(A, 'coefficients')
        check_finite(b, 'constants')
        check_square(A.shape, 'Linear system solve')

        n = A.shape[0]
        if b.shape[0] != n:
            raise DimensionError(
                f"constants: expected {n} values for a {n}x{n} system, got {b.shape[0]}",
                operation='solve',
                left_shape=A.shape,
                right_shape=b.shape,
            )

        return cls(_A=A, _b=b, _n=n)

    @property
    def coefficients(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n), copy."""
        return self._A.copy()

    @property
    def constants(self) -> NDArray[np.floating[Any]]:
        """Constants vector (n,), copy."""
        return self._b.copy()

    @property
    def n(self) -> int:
        """Number of equations (and unknowns)."""
        return self._n

    def augmented(self) -> NDArray[np.floating[Any]]:
        """Fresh n x (n+1) augmented matrix [A | b]."""
        return np.column_stack([self._A, self._b])
