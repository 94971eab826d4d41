"""
Tests para core/runoff/scs.py - Método SCS Curve Number.
"""

import numpy as np
import pytest

from hidrocuenca.config import UnitSystem
from hidrocuenca.core.runoff import (
    cumulative_rainfall,
    incremental_runoff,
    rainfall_excess_series,
    scs_initial_abstraction,
    scs_potential_retention,
    scs_runoff,
)
from hidrocuenca.exceptions import InvalidUnitSystem


class TestSCSPotentialRetention:
    """Tests para retención potencial S."""

    def test_metric(self):
        """Test S = 25400/CN - 254."""
        assert scs_potential_retention(80, "m") == pytest.approx(63.5)

    def test_si(self):
        """Test S = 1000/CN - 10."""
        assert scs_potential_retention(80, UnitSystem.SI) == pytest.approx(2.5)

    def test_cn_100_no_retention(self):
        """Test CN = 100 implica S = 0."""
        assert scs_potential_retention(100) == pytest.approx(0.0)

    def test_invalid_cn(self):
        """Test CN fuera de rango."""
        with pytest.raises(ValueError, match="CN debe estar entre 0 y 100"):
            scs_potential_retention(0)

    def test_invalid_units(self):
        """Test unidades desconocidas."""
        with pytest.raises(InvalidUnitSystem):
            scs_potential_retention(80, "km")


class TestSCSRunoff:
    """Tests para escorrentía SCS-CN."""

    def test_initial_abstraction(self):
        """Test Ia = 0.2 S."""
        assert scs_initial_abstraction(63.5) == pytest.approx(12.7)

    def test_below_abstraction_zero(self):
        """Test P <= Ia produce escorrentía cero."""
        assert scs_runoff(10.0, 80) == 0.0
        assert scs_runoff(12.0, 80) == 0.0

    def test_known_value(self):
        """Test valor conocido."""
        # S = 63.5, Ia = 12.7 -> Q = 37.3² / 100.8
        assert scs_runoff(50.0, 80) == pytest.approx(37.3 ** 2 / 100.8)

    def test_runoff_less_than_rainfall(self):
        """Test Q < P."""
        P = np.array([20.0, 50.0, 100.0, 200.0])
        Q = scs_runoff(P, 75)
        assert np.all(Q < P)
        assert np.all(np.diff(Q) > 0)

    def test_scalar_returns_float(self):
        """Test entrada escalar devuelve float."""
        assert isinstance(scs_runoff(50.0, 80), float)


class TestRainfallExcess:
    """Tests para series de exceso de lluvia."""

    def test_cumulative_rainfall(self):
        """Test suma corrida."""
        assert cumulative_rainfall([1.0, 2.0, 3.0]).tolist() == [1.0, 3.0, 6.0]

    def test_incremental_runoff(self):
        """Test diferencias con Q[-1] = 0."""
        result = incremental_runoff([0.0, 1.5, 4.0, 4.0])
        assert result.tolist() == pytest.approx([0.0, 1.5, 2.5, 0.0])

    def test_incremental_runoff_rounded(self):
        """Test redondeo a 3 decimales."""
        result = incremental_runoff([0.12345])
        assert result[0] == pytest.approx(0.123)

    def test_excess_sums_to_total_runoff(self, sample_rainfall_series):
        """Test que el exceso suma la escorrentía total."""
        excess = rainfall_excess_series(sample_rainfall_series, 80)
        total = scs_runoff(sample_rainfall_series.sum(), 80)
        assert excess.sum() == pytest.approx(total, abs=0.01)
        assert np.all(excess >= 0)

    def test_excess_zero_before_abstraction(self):
        """Test exceso nulo mientras la lluvia acumulada no supera Ia."""
        excess = rainfall_excess_series([2.0, 2.0, 2.0], 80)
        assert excess.tolist() == [0.0, 0.0, 0.0]
