"""
Tests para core/linalg.py - Álgebra lineal densa.
"""

import numpy as np
import pytest

from hidrocuenca.core.linalg import (
    matrix,
    vector,
    solve_linear_system,
    residual_norm,
)
from hidrocuenca.exceptions import HidroCuencaError, ShapeMismatch, SingularMatrix


class TestMatrixVector:
    """Tests para construcción de arreglos."""

    def test_matrix_fill(self):
        """Test matriz rellena con valor."""
        m = matrix(2, 3, fill=1.5)
        assert m.shape == (2, 3)
        assert np.all(m == 1.5)

    def test_matrix_rows_independent(self):
        """Test que las filas no comparten memoria."""
        m = matrix(3, 3)
        m[0, 0] = 7.0
        assert m[1, 0] == 0.0
        assert m[2, 0] == 0.0

    def test_vector_default_zero(self):
        """Test vector por defecto en cero."""
        v = vector(4)
        assert v.tolist() == [0.0, 0.0, 0.0, 0.0]

    def test_negative_size_error(self):
        """Test error con dimensiones negativas."""
        with pytest.raises(ValueError):
            matrix(-1, 2)
        with pytest.raises(ValueError):
            vector(-3)


class TestSolveLinearSystem:
    """Tests para eliminación gaussiana con pivoteo parcial."""

    def test_2x2_system(self):
        """Test sistema 2x2 conocido."""
        x = solve_linear_system([[2.0, 1.0], [1.0, 3.0]], [3.0, 5.0])
        assert x[0] == pytest.approx(0.8)
        assert x[1] == pytest.approx(1.4)

    def test_identity(self):
        """Test matriz identidad devuelve b."""
        b = [1.0, -2.0, 3.5]
        x = solve_linear_system(np.eye(3), b)
        assert x.tolist() == pytest.approx(b)

    def test_requires_pivoting(self):
        """Test sistema con cero en la diagonal (requiere pivoteo)."""
        a = [[0.0, 1.0], [1.0, 0.0]]
        x = solve_linear_system(a, [2.0, 3.0])
        assert x.tolist() == pytest.approx([3.0, 2.0])

    def test_residual_small(self):
        """Test residuo pequeño para sistema aleatorio bien condicionado."""
        rng = np.random.default_rng(42)
        a = rng.normal(size=(6, 6)) + 6 * np.eye(6)
        b = rng.normal(size=6)
        x = solve_linear_system(a, b)
        assert residual_norm(a, x, b) < 1e-10
        assert x == pytest.approx(np.linalg.solve(a, b))

    def test_inputs_not_modified(self):
        """Test que A y b no se modifican."""
        a = np.array([[0.0, 1.0], [1.0, 0.0]])
        b = np.array([2.0, 3.0])
        solve_linear_system(a, b)
        assert a.tolist() == [[0.0, 1.0], [1.0, 0.0]]
        assert b.tolist() == [2.0, 3.0]

    def test_singular_matrix(self):
        """Test matriz singular."""
        with pytest.raises(SingularMatrix) as exc_info:
            solve_linear_system([[1.0, 2.0], [2.0, 4.0]], [1.0, 2.0])
        assert exc_info.value.row == 1
        assert isinstance(exc_info.value, HidroCuencaError)

    def test_zero_matrix_singular_at_first_row(self):
        """Test matriz nula falla en la primera fila."""
        with pytest.raises(SingularMatrix) as exc_info:
            solve_linear_system(np.zeros((3, 3)), [1.0, 1.0, 1.0])
        assert exc_info.value.row == 0

    def test_non_square_matrix(self):
        """Test matriz no cuadrada."""
        with pytest.raises(ShapeMismatch):
            solve_linear_system([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], [1.0, 2.0])

    def test_vector_length_mismatch(self):
        """Test vector b con longitud incorrecta."""
        with pytest.raises(ShapeMismatch) as exc_info:
            solve_linear_system(np.eye(3), [1.0, 2.0])
        assert exc_info.value.lengths == {"matriz": 3, "vector": 2}

    def test_non_finite_values(self):
        """Test matriz o vector con NaN o infinitos."""
        with pytest.raises(ValueError, match="finitos"):
            solve_linear_system([[np.nan, 1.0], [1.0, 3.0]], [3.0, 5.0])
        with pytest.raises(ValueError, match="finitos"):
            solve_linear_system([[2.0, 1.0], [1.0, 3.0]], [np.inf, 5.0])
