"""
Dominant eigenpair by power iteration.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import ArrayLike

from pylinear.core.compute.tolerances import DEFAULT_MAX_ITERATIONS, ZERO_TOLERANCE
from pylinear.core.exceptions import ConvergenceError, DegenerateInputError
from pylinear.core.validation import check_square
from pylinear.decomposition._common import as_array
from pylinear.matrix import Matrix
from pylinear.vector import Vector


@dataclass(frozen=True)
class EigenResult:
    """
    Dominant eigenpair estimate.

    Attributes:
        eigenvalue: Estimate of the eigenvalue of largest magnitude
        eigenvector: Matching eigenvector, scaled so its largest-magnitude
            component is 1
        iterations: Number of A x products computed
    """
    eigenvalue: float
    eigenvector: Vector
    iterations: int


def power_iteration(
    matrix: Matrix | ArrayLike,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    tolerance: float = ZERO_TOLERANCE,
) -> EigenResult:
    """
    Dominant eigenvalue and eigenvector by power iteration.

    Starting from the all-ones vector, repeat:
        y = A x
        estimate = component of y with the largest |value| (first on ties)
        x = y / estimate
    until two consecutive estimates differ by less than `tolerance`. The
    first estimate is compared against 0.

    Args:
        matrix: Square matrix
        max_iterations: Iteration cap; the only stopping mechanism besides
            convergence
        tolerance: Convergence threshold on consecutive estimates

    Returns:
        EigenResult with eigenvalue, eigenvector and iteration count

    Raises:
        ValueError: If max_iterations < 1
        DimensionError: If the matrix is not square
        DegenerateInputError: If A x vanishes (the iterate lies in A's
            null space)
        ConvergenceError: If not converged after max_iterations
    """
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be at least 1, got {max_iterations}")

    A = as_array(matrix)
    check_square(A.shape, 'Power iteration')

    n = A.shape[0]
    x = np.ones(n)
    eigenvalue = 0.0
    change = 0.0

    for iteration in range(1, max_iterations + 1):
        y = A @ x

        estimate = float(y[int(np.argmax(np.abs(y)))])
        if estimate == 0:
            raise DegenerateInputError(
                f"Power iteration collapsed to the zero vector at iteration {iteration}",
                operation='power_iteration',
                value=estimate,
            )

        y /= estimate

        change = abs(estimate - eigenvalue)
        if change < tolerance:
            return EigenResult(
                eigenvalue=estimate,
                eigenvector=Vector._wrap(y),
                iterations=iteration,
            )

        eigenvalue = estimate
        x = y

    raise ConvergenceError(
        f"Power iteration did not converge after {max_iterations} iterations "
        f"(last change {change:.3g}, tolerance {tolerance:.3g})",
        iterations=max_iterations,
        final_change=change,
        reason='max_iterations',
        threshold=tolerance,
    )
