"""
Linear system backends.

    elimination: Gaussian elimination with partial pivoting (reference)
    lapack: rank classification plus scipy.linalg.solve (cross-check)
"""

from pylinear.linsolve.backends.elimination import EliminationBackend
from pylinear.linsolve.backends.lapack import LapackBackend

__all__ = [
    "EliminationBackend",
    "LapackBackend",
]
