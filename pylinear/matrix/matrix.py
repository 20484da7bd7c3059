"""
Dense real matrix.

Matrix is a value type: construction deep-copies the caller's grid, every
algebraic operation returns a new Matrix, and the only mutation is an
explicit element assignment (set).

Determinant strategies:
    cofactor:    recursive first-row expansion, exact reference values but
                 factorial time; used by 'auto' up to COFACTOR_MAX_SIZE
    elimination: partial-pivoting elimination with row-swap sign tracking;
                 used by 'auto' for larger matrices
"""

from __future__ import annotations

from numbers import Real
from typing import Any, Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.compute.formatting import format_matrix
from pylinear.core.compute.tolerances import COFACTOR_MAX_SIZE, is_zero
from pylinear.core.exceptions import DimensionError, SingularMatrixError
from pylinear.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_not_empty,
    check_rectangular,
    check_same_shape,
    check_square,
)
from pylinear.vector import Vector


DeterminantMethod = Literal['auto', 'cofactor', 'elimination']


class Matrix:
    """
    Dense row-major grid of reals with rows >= 1 and cols >= 1.

    Construction:
        Matrix([[1, 2], [3, 4]])   # deep copy of a rectangular grid
        Matrix(other_matrix)       # independent copy
        Matrix.zeros(2, 3)         # 2x3 zero matrix
        Matrix.identity(3)

    Binary operations validate shape compatibility before computing and
    raise DimensionError naming both shapes.
    """

    __slots__ = ('_data',)

    # numpy operands defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, data: ArrayLike | Matrix):
        if isinstance(data, Matrix):
            self._data = data._data.copy()
            return

        check_rectangular(data, 'matrix')
        arr = check_array(data, 'matrix')
        check_2d(arr, 'matrix')
        check_not_empty(arr, 'matrix')
        check_finite(arr, 'matrix')
        self._data = arr

    @classmethod
    def _wrap(cls, arr: NDArray[np.floating[Any]]) -> Matrix:
        """Adopt an array produced internally, skipping validation and copy."""
        matrix = cls.__new__(cls)
        matrix._data = arr
        return matrix

    @classmethod
    def zeros(cls, rows: int, cols: int | None = None) -> Matrix:
        """Zero-filled rows x cols matrix (square when cols is omitted)."""
        return cls(np.zeros((rows, rows if cols is None else cols)))

    @classmethod
    def identity(cls, size: int) -> Matrix:
        return cls(np.eye(size))

    # === Element access ===

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def get(self, row: int, col: int) -> float:
        return float(self._data[row, col])

    def set(self, row: int, col: int, value: float) -> None:
        """Overwrite one element in place."""
        self._data[row, col] = float(value)

    def row(self, row: int) -> list[float]:
        return self._data[row].tolist()

    def column(self, col: int) -> list[float]:
        return self._data[:, col].tolist()

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the elements as a float64 2D array."""
        return self._data.copy()

    def clone(self) -> Matrix:
        return Matrix(self)

    # === Arithmetic ===

    def add(self, other: Matrix) -> Matrix:
        check_same_shape(self.shape, other.shape, 'add')
        return Matrix._wrap(self._data + other._data)

    def subtract(self, other: Matrix) -> Matrix:
        check_same_shape(self.shape, other.shape, 'subtract')
        return Matrix._wrap(self._data - other._data)

    def multiply_scalar(self, scalar: float) -> Matrix:
        return Matrix._wrap(self._data * float(scalar))

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self @ other.

        Raises:
            DimensionError: If self.cols != other.rows
        """
        if self.cols != other.rows:
            raise DimensionError(
                f"Cannot multiply matrices: {self.rows}x{self.cols} "
                f"and {other.rows}x{other.cols}",
                operation='multiply',
                left_shape=self.shape,
                right_shape=other.shape,
            )
        return Matrix._wrap(self._data @ other._data)

    def multiply_vector(self, vector: Vector) -> Vector:
        """
        Matrix-vector product A . v.

        Raises:
            DimensionError: If self.cols != vector.dimension
        """
        if self.cols != vector.dimension:
            raise DimensionError(
                f"Cannot multiply {self.rows}x{self.cols} matrix "
                f"by vector of dimension {vector.dimension}",
                operation='multiply_vector',
                left_shape=self.shape,
                right_shape=(vector.dimension,),
            )
        return Vector._wrap(self._data @ vector.to_numpy())

    def transpose(self) -> Matrix:
        return Matrix._wrap(self._data.T.copy())

    # === Square-only operations ===

    def minor(self, row: int, col: int) -> Matrix:
        """Submatrix with `row` and `col` removed."""
        data = np.delete(np.delete(self._data, row, axis=0), col, axis=1)
        return Matrix._wrap(data)

    def determinant(self, method: DeterminantMethod = 'auto') -> float:
        """
        Determinant of a square matrix.

        Args:
            method: 'cofactor' for recursive first-row expansion,
                    'elimination' for partial-pivoting elimination,
                    'auto' for cofactor up to COFACTOR_MAX_SIZE and
                    elimination above

        Raises:
            DimensionError: If the matrix is not square
            ValueError: If the method is unknown
        """
        check_square(self.shape, 'Determinant')

        if method == 'auto':
            method = 'cofactor' if self.rows <= COFACTOR_MAX_SIZE else 'elimination'

        if method == 'cofactor':
            return _cofactor_determinant(self._data)
        elif method == 'elimination':
            return _elimination_determinant(self._data)
        else:
            raise ValueError(f"Unknown determinant method: {method!r}")

    def inverse(self) -> Matrix:
        """
        Inverse via Gauss-Jordan elimination on [A | I].

        Partial pivoting picks, in each column, the row at or below the
        pivot row with the largest absolute value. The pivot row is scaled
        to 1 and the column is cleared in every other row.

        Raises:
            DimensionError: If the matrix is not square
            SingularMatrixError: If |det| < 1e-10
        """
        check_square(self.shape, 'Inverse')

        n = self.rows
        det = self.determinant()
        if is_zero(det):
            raise SingularMatrixError(
                f"Matrix is not invertible (determinant = {det:.3g})",
                matrix_name='A',
                determinant=det,
                expected_rank=n,
                operation='inverse',
            )

        augmented = np.hstack([self._data, np.eye(n)])

        for i in range(n):
            max_row = i + int(np.argmax(np.abs(augmented[i:, i])))
            if max_row != i:
                augmented[[i, max_row]] = augmented[[max_row, i]]

            augmented[i] = augmented[i] / augmented[i, i]

            for k in range(n):
                if k != i:
                    augmented[k] = augmented[k] - augmented[k, i] * augmented[i]

        return Matrix._wrap(augmented[:, n:].copy())

    # === Protocol methods ===

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Matrix:
        return self.multiply_scalar(-1)

    def __mul__(self, scalar: float) -> Matrix:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.multiply_scalar(scalar)

    __rmul__ = __mul__

    def __matmul__(self, other: Matrix | Vector) -> Matrix | Vector:
        if isinstance(other, Matrix):
            return self.multiply(other)
        if isinstance(other, Vector):
            return self.multiply_vector(other)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    # Mutable through set(), so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return format_matrix(self._data)

    def __repr__(self) -> str:
        return f"Matrix({self.to_list()!r})"


def _cofactor_determinant(a: NDArray[np.floating[Any]]) -> float:
    """det = sum_j (-1)^j a[0][j] det(minor(0, j))."""
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])

    det = 0.0
    rest = a[1:]
    for j in range(n):
        minor = np.delete(rest, j, axis=1)
        det += (-1) ** j * float(a[0, j]) * _cofactor_determinant(minor)
    return det


def _elimination_determinant(a: NDArray[np.floating[Any]]) -> float:
    """Product of pivots from partial-pivoting elimination, sign flipped per swap."""
    u = a.copy()
    n = u.shape[0]
    det = 1.0

    for i in range(n):
        pivot_row = i + int(np.argmax(np.abs(u[i:, i])))
        if is_zero(u[pivot_row, i]):
            return 0.0
        if pivot_row != i:
            u[[i, pivot_row]] = u[[pivot_row, i]]
            det = -det

        det *= float(u[i, i])
        for k in range(i + 1, n):
            u[k, i:] -= (u[k, i] / u[i, i]) * u[i, i:]

    return det
