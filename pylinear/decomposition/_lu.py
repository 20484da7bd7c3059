"""
LU decomposition without pivoting (Doolittle form).

A = L U with L unit lower triangular and U upper triangular. No rows are
exchanged, so the caller must supply a matrix whose leading pivots are
non-zero. Matrices that need pivoting raise DegenerateInputError; use
Matrix.inverse() or linsolve.solve() for those.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from pylinear.core.compute.tolerances import ZERO_TOLERANCE
from pylinear.core.exceptions import DegenerateInputError
from pylinear.core.validation import check_square
from pylinear.decomposition._common import as_array
from pylinear.matrix import Matrix


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition.

    Attributes:
        L: Unit lower triangular matrix holding the elimination multipliers
        U: Upper triangular matrix
    """
    L: Matrix
    U: Matrix

    @property
    def determinant(self) -> float:
        """det(A) = product of U's diagonal (det(L) = 1)."""
        u = self.U.to_numpy()
        return float(np.prod(np.diag(u)))


def lu(matrix: Matrix | ArrayLike, tolerance: float = ZERO_TOLERANCE) -> LUResult:
    """
    LU decomposition by Gaussian elimination without pivoting.

    For each pivot column i and each row j below it:
        factor = U[j][i] / U[i][i];  L[j][i] = factor;  R_j -= factor * R_i

    Args:
        matrix: Square matrix to decompose
        tolerance: Pivots with magnitude below this are rejected

    Returns:
        LUResult with L and U

    Raises:
        DimensionError: If the matrix is not square
        DegenerateInputError: If a pivot is within tolerance of zero
    """
    U = as_array(matrix)
    check_square(U.shape, 'LU decomposition')

    n = U.shape[0]
    L = np.eye(n)

    for i in range(n - 1):
        for j in range(i + 1, n):
            pivot = U[i, i]
            if abs(pivot) < tolerance:
                raise DegenerateInputError(
                    f"Matrix requires pivoting for LU decomposition "
                    f"(pivot {i + 1} = {pivot:.3g})",
                    operation='lu',
                    value=float(pivot),
                )

            factor = U[j, i] / pivot
            L[j, i] = factor
            U[j, i:] -= factor * U[i, i:]

    return LUResult(L=Matrix._wrap(L), U=Matrix._wrap(U))
