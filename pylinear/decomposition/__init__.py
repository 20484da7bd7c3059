"""
Matrix decompositions and iterative methods.

Public API:
    lu(A) -> LUResult             LU without pivoting
    qr(A) -> QRResult             classical Gram-Schmidt QR
    qr_solve(A, b) -> Vector      least squares via QR
    power_iteration(A) -> EigenResult
    rank(A) -> int                elimination-based numerical rank

Conventions:
    - Inputs may be Matrix or any 2D array-like; they are never modified
    - Results are frozen dataclasses holding Matrix/Vector values
    - Errors are raised immediately with clear messages
"""

from pylinear.decomposition._eigen import EigenResult, power_iteration
from pylinear.decomposition._lu import LUResult, lu
from pylinear.decomposition._qr import QRResult, qr, qr_solve
from pylinear.decomposition._rank import rank

__all__ = [
    # LU
    "LUResult",
    "lu",
    # QR
    "QRResult",
    "qr",
    "qr_solve",
    # Eigen
    "EigenResult",
    "power_iteration",
    # Rank
    "rank",
]
