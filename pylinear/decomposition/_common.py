"""
Shared helpers for decompositions.
"""

from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.matrix import Matrix


def as_array(matrix: Matrix | ArrayLike) -> NDArray[np.floating[Any]]:
    """Working float64 copy of a Matrix or a validated 2D array-like."""
    if not isinstance(matrix, Matrix):
        matrix = Matrix(matrix)
    return matrix.to_numpy()
