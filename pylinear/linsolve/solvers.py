"""
Solver dispatch for linear systems.

This module provides the solve() function (public API) and backend selection.
"""

from typing import Literal

from numpy.typing import ArrayLike

from pylinear.core.compute.tolerances import ZERO_TOLERANCE
from pylinear.linsolve.backends import EliminationBackend, LapackBackend
from pylinear.linsolve.design import LinearSystemDesign
from pylinear.linsolve.solution import LinearSystemSolution
from pylinear.matrix import Matrix
from pylinear.vector import Vector


# Type alias for backend selection
BackendChoice = Literal['auto', 'elimination', 'lapack']


def solve(
    coefficients: ArrayLike | Matrix,
    constants: ArrayLike | Vector,
    *,
    backend: BackendChoice = 'auto',
    tolerance: float = ZERO_TOLERANCE,
) -> LinearSystemSolution:
    """
    Solve the square linear system A x = b.

    This is the primary public API for linear systems. All input validation,
    backend selection, and result wrapping happens here.

    Args:
        coefficients: Coefficient matrix A (n x n). Matrix or any 2D array-like.
        constants: Constants b (n,). Vector or any 1D array-like.
        backend: Computational backend to use:
            - 'auto': Gaussian elimination (reference behavior)
            - 'elimination': Gaussian elimination with partial pivoting,
              full step trace
            - 'lapack': rank classification plus LAPACK solve
        tolerance: Magnitudes below this are treated as zero

    Returns:
        LinearSystemSolution with classification, solution and steps

    Raises:
        ValidationError: If inputs are invalid
        DimensionError: If A is not square or b has the wrong length

    Example:
        >>> from pylinear.linsolve import solve
        >>> result = solve([[2, 1, -1], [-3, -1, 2], [-2, 1, 2]], [8, -11, -3])
        >>> result.status
        <SolutionStatus.UNIQUE: 'unique'>
        >>> print(result.solution)
        [2.000, 3.000, -1.000]
    """
    # === Construct Design ===
    # This is the boundary - validate here, trust everywhere else
    design = LinearSystemDesign.build(coefficients, constants)

    # === Select Backend ===
    backend_impl = _get_backend(backend, tolerance)

    # === Solve ===
    result = backend_impl.solve(design)

    # === Wrap and Return ===
    return LinearSystemSolution(_result=result, _design=design)


def _get_backend(choice: BackendChoice, tolerance: float):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice in ('auto', 'elimination'):
        return EliminationBackend(tolerance=tolerance)
    elif choice == 'lapack':
        return LapackBackend(tolerance=tolerance)
    else:
        raise ValueError(f"Unknown backend: {choice!r}")
