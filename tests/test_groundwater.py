"""
Tests para core/groundwater.py - Flujo subterráneo 1D.
"""

import numpy as np
import pytest

from hidrocuenca.core.groundwater import (
    assemble_groundwater_system,
    darcy_flux,
    groundwater_1d,
)
from hidrocuenca.core.linalg import residual_norm, solve_linear_system
from hidrocuenca.exceptions import SingularMatrix


class TestAssembleSystem:
    """Tests para el armado del sistema de diferencias finitas."""

    def test_shape(self):
        """Test dimensiones del sistema."""
        a, b = assemble_groundwater_system(10.0, 1.0, 11)
        assert a.shape == (11, 11)
        assert b.shape == (11,)

    def test_interior_stencil(self):
        """Test estencil interior (-1, 2, -1) × k/dx²."""
        a, _ = assemble_groundwater_system(10.0, 2.0, 11)
        assert a[5, 4:7].tolist() == pytest.approx([-2.0, 4.0, -2.0])

    def test_recharge_rhs(self):
        """Test término fuente w0 + w1·x en nodos interiores."""
        _, b = assemble_groundwater_system(10.0, 1.0, 11, w0=1.0, w1=0.5, q0=3.0)
        assert b[0] == 3.0
        assert b[4] == pytest.approx(1.0 + 0.5 * 4.0)

    def test_fixed_head_row(self):
        """Test fila de carga fija."""
        a, b = assemble_groundwater_system(10.0, 1.0, 11, hl=7.5)
        assert a[-1].tolist() == [0.0] * 10 + [1.0]
        assert b[-1] == 7.5

    def test_invalid_inputs(self):
        """Test errores de parámetros."""
        with pytest.raises(ValueError):
            assemble_groundwater_system(0.0, 1.0, 11)
        with pytest.raises(ValueError):
            assemble_groundwater_system(10.0, -1.0, 11)
        with pytest.raises(ValueError, match="al menos 3 nodos"):
            assemble_groundwater_system(10.0, 1.0, 2)


class TestGroundwater1D:
    """Tests para la solución del flujo subterráneo."""

    def test_linear_head_without_recharge(self):
        """Test carga lineal con flujo de entrada y carga fija."""
        # h(x) = hL + q0/k × (L - x)
        result = groundwater_1d(100.0, 5.0, 21, q0=0.5, hl=10.0)
        x = np.array(result.x)
        expected = 10.0 + 0.5 / 5.0 * (100.0 - x)
        assert result.head == pytest.approx(expected.tolist())
        assert result.head[0] == pytest.approx(20.0)
        assert result.dx == pytest.approx(5.0)

    def test_flux_constant_without_recharge(self):
        """Test caudal específico igual a q0 sin recarga."""
        result = groundwater_1d(100.0, 5.0, 21, q0=0.5, hl=10.0)
        assert result.flux == pytest.approx([0.5] * 21)

    def test_no_flow_flat_head(self):
        """Test sin flujo ni recarga la carga es uniforme."""
        result = groundwater_1d(50.0, 2.0, 6, hl=3.0)
        assert result.head == pytest.approx([3.0] * 6)

    def test_recharge_raises_head(self):
        """Test que la recarga eleva la carga hacia el borde impermeable."""
        result = groundwater_1d(100.0, 5.0, 21, w0=0.01, hl=10.0)
        head = np.array(result.head)
        assert np.all(head >= 10.0 - 1e-12)
        assert np.all(np.diff(head) <= 1e-12)

    def test_solution_satisfies_system(self):
        """Test residuo pequeño de la solución."""
        a, b = assemble_groundwater_system(100.0, 5.0, 21, w0=0.01, w1=1e-4, q0=0.2, hl=10.0)
        h = solve_linear_system(a, b)
        assert residual_norm(a, h, b) < 1e-9

    def test_pure_flux_singular(self):
        """Test flujo en ambos bordes sin carga fija es singular."""
        with pytest.raises(SingularMatrix):
            groundwater_1d(10.0, 1.0, 11, q0=1.0, ql=1.0)


class TestDarcyFlux:
    """Tests para la ley de Darcy discreta."""

    def test_linear_head(self):
        """Test gradiente constante."""
        head = np.array([4.0, 3.0, 2.0, 1.0])
        q = darcy_flux(head, 2.0, 1.0)
        assert q.tolist() == pytest.approx([2.0, 2.0, 2.0, 2.0])
