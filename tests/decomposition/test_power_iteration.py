"""
Tests for power iteration.
"""

import numpy as np
import pytest

from pylinear.core.exceptions import ConvergenceError, DegenerateInputError, DimensionError
from pylinear.decomposition import EigenResult, power_iteration
from pylinear.matrix import Matrix
from pylinear.vector import Vector


class TestPowerIteration:

    def test_symmetric_2x2(self):
        result = power_iteration([[2, 1], [1, 2]])
        assert isinstance(result, EigenResult)
        assert result.eigenvalue == pytest.approx(3.0)
        assert result.eigenvector == Vector([1, 1])
        assert result.iterations == 2

    def test_non_symmetric(self):
        result = power_iteration(Matrix([[4, 1], [2, 3]]))
        assert result.eigenvalue == pytest.approx(5.0)

    def test_matches_numpy(self):
        A = np.array([[2.0, 1.0], [1.0, 3.0]])
        result = power_iteration(A)
        assert result.eigenvalue == pytest.approx(np.max(np.linalg.eigvalsh(A)), abs=1e-8)

    def test_eigenpair_relation(self):
        A = Matrix([[2, 1], [1, 3]])
        result = power_iteration(A)
        np.testing.assert_allclose(
            A.multiply_vector(result.eigenvector).to_numpy(),
            result.eigenvector.multiply_scalar(result.eigenvalue).to_numpy(),
            rtol=0, atol=1e-6,
        )

    def test_stops_on_repeated_estimate(self):
        """Two equal consecutive estimates stop the loop even off an eigenvector."""
        result = power_iteration([[2, 1, 0], [1, 3, 1], [0, 1, 4]])
        assert result.iterations == 2
        assert result.eigenvalue == 5.0
        np.testing.assert_allclose(
            result.eigenvector.to_numpy(), [0.44, 0.92, 1.0], rtol=0, atol=1e-12
        )

    def test_eigenvector_scaled_to_unit_max(self):
        result = power_iteration([[2, 1], [1, 3]])
        assert max(abs(v) for v in result.eigenvector) == 1.0

    def test_rotation_does_not_converge(self):
        with pytest.raises(ConvergenceError, match="did not converge after 1000") as exc_info:
            power_iteration([[0, -1], [1, 0]])
        assert exc_info.value.iterations == 1000
        assert exc_info.value.reason == 'max_iterations'

    def test_iteration_cap(self):
        with pytest.raises(ConvergenceError) as exc_info:
            power_iteration([[2, 1], [1, 2]], max_iterations=1)
        assert exc_info.value.iterations == 1

    def test_invalid_iteration_cap(self):
        with pytest.raises(ValueError, match="max_iterations"):
            power_iteration([[1]], max_iterations=0)

    def test_zero_matrix(self):
        with pytest.raises(DegenerateInputError, match="zero vector"):
            power_iteration([[0, 0], [0, 0]])

    def test_non_square(self):
        with pytest.raises(DimensionError, match="Power iteration requires a square matrix"):
            power_iteration([[1, 2, 3], [4, 5, 6]])
