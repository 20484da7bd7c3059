"""
Dense matrix arithmetic.

Public API:
    Matrix: value type with element-wise arithmetic, products, transpose,
            determinant (cofactor or elimination) and Gauss-Jordan inverse

Example:
    >>> from pylinear.matrix import Matrix
    >>> A = Matrix([[4, 7], [2, 6]])
    >>> A.determinant()
    10.0
    >>> print(A.inverse())
    [0.600, -0.700]
    [-0.200, 0.400]
"""

from pylinear.matrix.matrix import DeterminantMethod, Matrix

__all__ = [
    "Matrix",
    "DeterminantMethod",
]
