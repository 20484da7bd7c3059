"""
Fixed-dimension real vector.

Vector is a value type: construction deep-copies the caller's data, every
algebraic operation returns a new Vector, and the only mutation is an
explicit element assignment (set / item assignment).
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Iterator

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinear.core.compute.formatting import format_row
from pylinear.core.compute.tolerances import is_zero
from pylinear.core.exceptions import (
    DegenerateInputError,
    UnsupportedOperationError,
)
from pylinear.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_not_empty,
    check_same_shape,
)


class Vector:
    """
    Ordered sequence of real numbers with a fixed dimension >= 1.

    Construction:
        Vector([1, 2, 3])          # deep copy of any 1D array-like
        Vector(other_vector)       # independent copy
        Vector.zero(3)             # [0, 0, 0]
        Vector.unit(3, 1)          # [0, 1, 0]

    All binary operations raise DimensionError when the operand dimensions
    differ.
    """

    __slots__ = ('_data',)

    # numpy operands defer to the reflected operators below
    __array_ufunc__ = None

    def __init__(self, data: ArrayLike | Vector):
        if isinstance(data, Vector):
            self._data = data._data.copy()
            return

        arr = check_array(data, 'vector')
        check_1d(arr, 'vector')
        check_not_empty(arr, 'vector')
        check_finite(arr, 'vector')
        self._data = arr

    @classmethod
    def _wrap(cls, arr: NDArray[np.floating[Any]]) -> Vector:
        """Adopt an array produced internally, skipping validation and copy."""
        vector = cls.__new__(cls)
        vector._data = arr
        return vector

    @classmethod
    def zero(cls, dimension: int) -> Vector:
        """Zero vector of the given dimension."""
        return cls(np.zeros(dimension))

    @classmethod
    def unit(cls, dimension: int, index: int) -> Vector:
        """Standard basis vector with a 1 at `index`."""
        vector = cls.zero(dimension)
        vector.set(index, 1.0)
        return vector

    # === Element access ===

    @property
    def dimension(self) -> int:
        return self._data.shape[0]

    def get(self, index: int) -> float:
        return float(self._data[index])

    def set(self, index: int, value: float) -> None:
        """Overwrite one element in place."""
        self._data[index] = float(value)

    def to_list(self) -> list[float]:
        return self._data.tolist()

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Copy of the elements as a float64 array."""
        return self._data.copy()

    def clone(self) -> Vector:
        return Vector(self)

    # === Arithmetic ===

    def add(self, other: Vector) -> Vector:
        self._check_dimension(other, 'add')
        return Vector._wrap(self._data + other._data)

    def subtract(self, other: Vector) -> Vector:
        self._check_dimension(other, 'subtract')
        return Vector._wrap(self._data - other._data)

    def multiply_scalar(self, scalar: float) -> Vector:
        return Vector._wrap(self._data * float(scalar))

    def dot(self, other: Vector) -> float:
        """Sum of element-wise products."""
        self._check_dimension(other, 'dot')
        return float(np.dot(self._data, other._data))

    def cross(self, other: Vector) -> Vector:
        """
        Right-handed cross product.

        Only defined for 3-dimensional operands:
            (a2*b3 - a3*b2, a3*b1 - a1*b3, a1*b2 - a2*b1)

        Raises:
            UnsupportedOperationError: If either operand is not 3D
        """
        if self.dimension != 3 or other.dimension != 3:
            raise UnsupportedOperationError(
                f"Cross product is only defined for 3D vectors, "
                f"got dimensions {self.dimension} and {other.dimension}",
                operation='cross',
                shape=(self.dimension, other.dimension),
            )

        a1, a2, a3 = self._data
        b1, b2, b3 = other._data
        return Vector._wrap(np.array([
            a2 * b3 - a3 * b2,
            a3 * b1 - a1 * b3,
            a1 * b2 - a2 * b1,
        ]))

    # === Metrics ===

    def magnitude(self) -> float:
        """Euclidean norm, sqrt(v . v)."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vector:
        """
        Unit vector in the same direction.

        Raises:
            DegenerateInputError: If the magnitude is exactly zero
        """
        mag = self.magnitude()
        if mag == 0:
            raise DegenerateInputError(
                "Cannot normalize zero vector",
                operation='normalize',
                value=mag,
            )
        return self.multiply_scalar(1 / mag)

    def distance_to(self, other: Vector) -> float:
        return self.subtract(other).magnitude()

    def angle_to(self, other: Vector) -> float:
        """
        Angle between the vectors in radians, in [0, pi].

        The cosine is clamped to [-1, 1] before acos so that rounding
        overshoot on (anti)parallel vectors does not produce NaN.

        Raises:
            DegenerateInputError: If either vector has zero magnitude
        """
        dot = self.dot(other)
        mag1 = self.magnitude()
        mag2 = other.magnitude()

        if mag1 == 0 or mag2 == 0:
            raise DegenerateInputError(
                "Cannot calculate angle with zero vector",
                operation='angle_to',
                value=0.0,
            )

        cos_theta = dot / (mag1 * mag2)
        return math.acos(max(-1.0, min(1.0, cos_theta)))

    def is_parallel_to(self, other: Vector) -> bool:
        """True if |unit(a) . unit(b)| is within 1e-10 of 1."""
        self._check_dimension(other, 'compare')
        dot = abs(self.normalize().dot(other.normalize()))
        return is_zero(dot - 1)

    def is_orthogonal_to(self, other: Vector) -> bool:
        """True if |a . b| is below 1e-10."""
        return is_zero(self.dot(other))

    def project_onto(self, other: Vector) -> Vector:
        """
        Orthogonal projection onto `other`: other * (a . b) / (b . b).

        Raises:
            DegenerateInputError: If `other` is the zero vector
        """
        other_mag_squared = other.dot(other)
        if other_mag_squared == 0:
            raise DegenerateInputError(
                "Cannot project onto zero vector",
                operation='project_onto',
                value=other_mag_squared,
            )
        return other.multiply_scalar(self.dot(other) / other_mag_squared)

    # === Protocol methods ===

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return iter(self._data.tolist())

    def __getitem__(self, index: int) -> float:
        return self.get(index)

    def __setitem__(self, index: int, value: float) -> None:
        self.set(index, value)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> Vector:
        return self.multiply_scalar(-1)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self.multiply_scalar(scalar)

    __rmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return bool(np.array_equal(self._data, other._data))

    # Mutable through set(), so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return format_row(self._data)

    def __repr__(self) -> str:
        return f"Vector({self.to_list()!r})"

    def _check_dimension(self, other: Vector, operation: str) -> None:
        check_same_shape(self._data.shape, other._data.shape, operation)
