"""
Exception hierarchy for pylinear.

All exceptions inherit from PyLinearError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinearError(Exception):
    """Base exception for all pylinear errors."""
    pass


class ValidationError(PyLinearError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks
    (non-numeric data, NaN/Inf, empty containers).
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or incompatible.

    Raised when vector dimensions or matrix shapes don't match what an
    operation requires (element-wise ops, products, square-only ops).

    Attributes:
        operation: Name of the operation that rejected the operands
        left_shape: Shape of the first (or only) operand, if known
        right_shape: Shape of the second operand, if known
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class UnsupportedOperationError(ValidationError):
    """
    Operation is not defined for operands of this shape.

    Raised e.g. for a cross product on vectors that are not 3-dimensional.

    Attributes:
        operation: Name of the unsupported operation
        shape: Shape (or dimension tuple) that made the operation undefined
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class NumericalError(PyLinearError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class DegenerateInputError(NumericalError):
    """
    Input is degenerate for the requested operation.

    Raised for zero vectors (normalize, angle, projection), zero pivots in
    unpivoted LU, and iterations whose iterate vanishes.

    Attributes:
        operation: Name of the operation that hit the degenerate input
        value: The offending magnitude or pivot value, if available
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        value: float | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.value = value


class SingularMatrixError(DegenerateInputError):
    """
    Matrix is singular or nearly singular.

    Raised when a matrix operation requires invertibility but the matrix
    is singular or numerically rank-deficient.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Computed determinant, if available
        rank: Numerical rank, if computed
        expected_rank: Expected rank (typically min(rows, cols))
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
        operation: str | None = None,
    ):
        super().__init__(message, operation=operation, value=determinant)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.rank = rank
        self.expected_rank = expected_rank


class ConvergenceError(PyLinearError):
    """
    Iterative algorithm failed to converge.

    Raised when an iterative method (power iteration) fails to meet its
    convergence criterion within the maximum number of iterations.

    Attributes:
        iterations: Number of iterations completed
        final_change: Final change between consecutive estimates
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The convergence threshold that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
