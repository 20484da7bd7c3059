"""
Tests for LU decomposition without pivoting.
"""

import numpy as np
import pytest

from pylinear.core.exceptions import DegenerateInputError, DimensionError
from pylinear.decomposition import LUResult, lu
from pylinear.matrix import Matrix


class TestLU:

    def test_2x2_exact(self):
        result = lu([[4, 3], [6, 3]])
        assert isinstance(result, LUResult)
        assert result.L == Matrix([[1, 0], [1.5, 1]])
        assert result.U == Matrix([[4, 3], [0, -1.5]])

    def test_reconstruction(self, well_conditioned):
        result = lu(Matrix(well_conditioned))
        np.testing.assert_allclose(
            result.L.multiply(result.U).to_numpy(), well_conditioned,
            rtol=0, atol=1e-9,
        )

    def test_triangular_structure(self, well_conditioned):
        result = lu(well_conditioned)
        L = result.L.to_numpy()
        U = result.U.to_numpy()
        np.testing.assert_array_equal(np.diag(L), np.ones(5))
        np.testing.assert_array_equal(np.triu(L, k=1), np.zeros((5, 5)))
        np.testing.assert_allclose(np.tril(U, k=-1), np.zeros((5, 5)), atol=1e-12)

    def test_determinant(self, well_conditioned):
        assert lu(well_conditioned).determinant == pytest.approx(
            np.linalg.det(well_conditioned), rel=1e-9
        )

    def test_1x1(self):
        result = lu([[5]])
        assert result.L == Matrix([[1]])
        assert result.U == Matrix([[5]])

    def test_input_unchanged(self):
        m = Matrix([[4, 3], [6, 3]])
        lu(m)
        assert m == Matrix([[4, 3], [6, 3]])

    def test_requires_pivoting(self):
        with pytest.raises(DegenerateInputError, match="requires pivoting") as exc_info:
            lu([[0, 1], [1, 0]])
        assert exc_info.value.operation == 'lu'

    def test_zero_pivot_after_elimination(self):
        with pytest.raises(DegenerateInputError):
            lu([[1, 2, 3], [2, 4, 5], [1, 1, 1]])

    def test_non_square(self):
        with pytest.raises(DimensionError, match="LU decomposition requires a square matrix"):
            lu([[1, 2, 3], [4, 5, 6]])
