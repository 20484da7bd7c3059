"""
QR decomposition by classical Gram-Schmidt.

A = Q R with Q's columns orthonormal and R upper triangular. Rank-deficient
input does not fail: a column whose residual vanishes leaves the matching
column of Q at zero and a (near-)zero on R's diagonal. Check `rank` or
`is_rank_deficient` before relying on Q.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike
from scipy.linalg import solve_triangular

from pylinear.core.compute.tolerances import ZERO_TOLERANCE
from pylinear.core.exceptions import DimensionError, SingularMatrixError
from pylinear.core.validation import check_1d, check_array, check_finite
from pylinear.decomposition._common import as_array
from pylinear.matrix import Matrix
from pylinear.vector import Vector


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Matrix with orthonormal (or zero) columns (m x n)
        R: Upper triangular matrix (n x n)
        rank: Number of R diagonal entries above tolerance
    """
    Q: Matrix
    R: Matrix
    rank: int

    @property
    def is_rank_deficient(self) -> bool:
        return self.rank < self.R.rows


def qr(matrix: Matrix | ArrayLike, tolerance: float = ZERO_TOLERANCE) -> QRResult:
    """
    QR decomposition of an m x n matrix via classical Gram-Schmidt.

    For each column j: subtract its projections onto the orthonormal
    columns 0..j-1 (stored in R[i][j]), store the residual norm in R[j][j]
    and, unless that norm is within tolerance of zero, the normalized
    residual as Q's column j.

    Args:
        matrix: Matrix to decompose (m x n)
        tolerance: Residual norms at or below this leave Q's column zero

    Returns:
        QRResult with Q, R, and numerical rank
    """
    A = as_array(matrix)
    m, n = A.shape

    Q = np.zeros((m, n))
    R = np.zeros((n, n))

    for j in range(n):
        v = A[:, j].copy()

        # Orthogonalization
        for i in range(j):
            projection = float(Q[:, i] @ v)
            R[i, j] = projection
            v -= projection * Q[:, i]

        # Normalization
        norm = float(np.sqrt(v @ v))
        R[j, j] = norm
        if norm > tolerance:
            Q[:, j] = v / norm

    rank = int(np.sum(np.abs(np.diag(R)) > tolerance))
    return QRResult(Q=Matrix._wrap(Q), R=Matrix._wrap(R), rank=rank)


def qr_solve(
    matrix: Matrix | ArrayLike,
    constants: Vector | ArrayLike,
    tolerance: float = ZERO_TOLERANCE,
) -> Vector:
    """
    Least squares solution of A x = b via QR decomposition.

    Solves min_x ||b - A x||^2 as:
        A = QR
        x = R^-1 Q'b

    For square full-rank A this is the exact solution.

    Args:
        matrix: Coefficient matrix (m x n), m >= n
        constants: Right-hand side (m,)
        tolerance: Rank tolerance passed to qr()

    Returns:
        Solution vector x (n,)

    Raises:
        DimensionError: If b's length differs from A's row count
        SingularMatrixError: If A is rank-deficient
    """
    A = as_array(matrix)
    if isinstance(constants, Vector):
        b = constants.to_numpy()
    else:
        b = check_array(constants, 'constants')
        check_1d(b, 'constants')
        check_finite(b, 'constants')

    m, n = A.shape
    if b.shape[0] != m:
        raise DimensionError(
            f"constants: expected {m} values for a {m}x{n} matrix, got {b.shape[0]}",
            operation='qr_solve',
            left_shape=(m, n),
            right_shape=b.shape,
        )

    qr_result = qr(A, tolerance=tolerance)
    if qr_result.rank < n:
        raise SingularMatrixError(
            f"Matrix is rank-deficient: rank={qr_result.rank}, expected={n}",
            matrix_name='A',
            rank=qr_result.rank,
            expected_rank=n,
            operation='qr_solve',
        )

    # x = R^-1 Q'b
    Qtb = qr_result.Q.to_numpy().T @ b
    x = solve_triangular(qr_result.R.to_numpy(), Qtb, lower=False)
    return Vector(x)
