"""
Tests for pylinear exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLinearError)
    - Diagnostic attributes on DimensionError, UnsupportedOperationError,
      DegenerateInputError, SingularMatrixError, ConvergenceError
    - str works correctly
    - Default attribute values (None for optional attributes)
"""

import pytest

from pylinear.core.exceptions import (
    ConvergenceError,
    DegenerateInputError,
    DimensionError,
    NumericalError,
    PyLinearError,
    SingularMatrixError,
    UnsupportedOperationError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLinearError."""

    def test_validation_error_is_pylinear_error(self):
        with pytest.raises(PyLinearError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_unsupported_operation_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise UnsupportedOperationError("cross of 2D vectors")

    def test_degenerate_input_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise DegenerateInputError("zero vector")

    def test_singular_matrix_is_degenerate_input(self):
        with pytest.raises(DegenerateInputError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_is_pylinear_error(self):
        with pytest.raises(PyLinearError):
            raise SingularMatrixError("singular")

    def test_convergence_error_is_pylinear_error(self):
        with pytest.raises(PyLinearError):
            raise ConvergenceError("did not converge", iterations=1000)

    def test_convergence_error_is_not_numerical_error(self):
        """ConvergenceError inherits from PyLinearError, not NumericalError."""
        err = ConvergenceError("did not converge", iterations=1000)
        assert not isinstance(err, NumericalError)

    def test_dimension_error_is_not_numerical_error(self):
        err = DimensionError("wrong shape")
        assert not isinstance(err, NumericalError)


# ═══════════════════════════════════════════════════════════════════════
# DimensionError / UnsupportedOperationError
# ═══════════════════════════════════════════════════════════════════════


class TestShapeErrors:
    """Shape errors carry the operation and operand shapes."""

    def test_dimension_error_attributes(self):
        err = DimensionError(
            "Cannot multiply matrices: 2x3 and 2x3",
            operation="multiply",
            left_shape=(2, 3),
            right_shape=(2, 3),
        )
        assert str(err) == "Cannot multiply matrices: 2x3 and 2x3"
        assert err.operation == "multiply"
        assert err.left_shape == (2, 3)
        assert err.right_shape == (2, 3)

    def test_dimension_error_defaults_are_none(self):
        err = DimensionError("wrong shape")
        assert err.operation is None
        assert err.left_shape is None
        assert err.right_shape is None

    def test_unsupported_operation_attributes(self):
        err = UnsupportedOperationError(
            "Cross product is only defined for 3D vectors",
            operation="cross",
            shape=(2, 2),
        )
        assert err.operation == "cross"
        assert err.shape == (2, 2)

    def test_unsupported_operation_defaults(self):
        err = UnsupportedOperationError("nope")
        assert err.operation is None
        assert err.shape is None


# ═══════════════════════════════════════════════════════════════════════
# DegenerateInputError / SingularMatrixError
# ═══════════════════════════════════════════════════════════════════════


class TestDegenerateInputError:
    """DegenerateInputError carries the operation and offending value."""

    def test_all_attributes(self):
        err = DegenerateInputError(
            "Cannot normalize zero vector", operation="normalize", value=0.0
        )
        assert str(err) == "Cannot normalize zero vector"
        assert err.operation == "normalize"
        assert err.value == 0.0

    def test_defaults_are_none(self):
        err = DegenerateInputError("degenerate")
        assert err.operation is None
        assert err.value is None


class TestSingularMatrixError:
    """SingularMatrixError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "A is singular",
            matrix_name="A",
            determinant=0.0,
            rank=2,
            expected_rank=3,
            operation="inverse",
        )
        assert str(err) == "A is singular"
        assert err.matrix_name == "A"
        assert err.determinant == 0.0
        assert err.rank == 2
        assert err.expected_rank == 3
        assert err.operation == "inverse"

    def test_determinant_is_reported_as_value(self):
        err = SingularMatrixError("singular", determinant=1e-14)
        assert err.value == 1e-14

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.determinant is None
        assert err.rank is None
        assert err.expected_rank is None
        assert err.operation is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="A", rank=1)
        assert exc_info.value.matrix_name == "A"
        assert exc_info.value.rank == 1


# ═══════════════════════════════════════════════════════════════════════
# ConvergenceError
# ═══════════════════════════════════════════════════════════════════════


class TestConvergenceError:
    """ConvergenceError carries iteration diagnostics."""

    def test_all_attributes(self):
        err = ConvergenceError(
            "Power iteration did not converge",
            iterations=1000,
            final_change=2.0,
            reason="max_iterations",
            threshold=1e-10,
        )
        assert str(err) == "Power iteration did not converge"
        assert err.iterations == 1000
        assert err.final_change == 2.0
        assert err.reason == "max_iterations"
        assert err.threshold == 1e-10

    def test_required_iterations(self):
        """iterations is required (positional)."""
        err = ConvergenceError("failed", 42)
        assert err.iterations == 42

    def test_defaults_are_none(self):
        err = ConvergenceError("failed", iterations=10)
        assert err.final_change is None
        assert err.reason is None
        assert err.threshold is None
