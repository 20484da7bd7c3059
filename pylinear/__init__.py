"""
pylinear: numeric linear algebra primitives for Python.

Value-type vectors and matrices, a Gaussian elimination solver with a
classified result and step trace, and the classic decompositions.

Submodules:
    vector: Fixed-dimension vector arithmetic
    matrix: Dense matrix arithmetic, determinant, inverse
    linsolve: Square linear systems (Gaussian elimination)
    decomposition: LU, QR, power iteration, rank
    geometry: Points, lines and planes over the Vector API
"""

__version__ = "0.1.0"

from pylinear import vector
from pylinear import matrix
from pylinear import linsolve
from pylinear import decomposition
from pylinear import geometry
from pylinear.vector import Vector
from pylinear.matrix import Matrix
from pylinear.linsolve import solve

__all__ = [
    "__version__",
    "vector",
    "matrix",
    "linsolve",
    "decomposition",
    "geometry",
    "Vector",
    "Matrix",
    "solve",
]
