"""
Fixed-dimension vector arithmetic.

Public API:
    Vector: value type with element-wise arithmetic, dot/cross products,
            norms, angles, parallel/orthogonal predicates and projection

Example:
    >>> from pylinear.vector import Vector
    >>> a = Vector([1, 0, 0])
    >>> b = Vector([0, 1, 0])
    >>> print(a.cross(b))
    [0.000, 0.000, 1.000]
"""

from pylinear.vector.vector import Vector

__all__ = [
    "Vector",
]
