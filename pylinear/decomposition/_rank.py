"""
Numerical rank by Gaussian elimination.
"""

import numpy as np
from numpy.typing import ArrayLike

from pylinear.core.compute.tolerances import ZERO_TOLERANCE
from pylinear.decomposition._common import as_array
from pylinear.matrix import Matrix


def rank(matrix: Matrix | ArrayLike, tolerance: float = ZERO_TOLERANCE) -> int:
    """
    Count of successful pivots in partial-pivoting elimination.

    Columns are visited left to right. A column whose best remaining pivot
    is below tolerance is skipped: neither the rank nor the pivot row
    advances. Otherwise the pivot row is swapped into place, the column is
    eliminated below it, and both advance.

    Args:
        matrix: Any m x n matrix
        tolerance: Pivots with magnitude below this count as zero

    Returns:
        Rank, at most min(m, n)
    """
    mat = as_array(matrix)
    m, n = mat.shape

    result = 0
    row = 0
    for col in range(n):
        if row >= m:
            break

        pivot_row = row + int(np.argmax(np.abs(mat[row:, col])))
        if abs(mat[pivot_row, col]) < tolerance:
            continue

        if pivot_row != row:
            mat[[row, pivot_row]] = mat[[pivot_row, row]]

        for i in range(row + 1, m):
            factor = mat[i, col] / mat[row, col]
            mat[i, col:] -= factor * mat[row, col:]

        result += 1
        row += 1

    return result
