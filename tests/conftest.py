"""Configuración de pytest para tests de hidrocuenca."""

import pytest
import numpy as np

from hidrocuenca.config import BasinParameters, LandUseProfile, UnitSystem
from hidrocuenca.core import dimensionless_unit_hydrograph, scale_unit_hydrograph


@pytest.fixture
def sample_basin_si():
    """Cuenca de ejemplo en unidades imperiales."""
    return BasinParameters(
        length=4000.0,
        slope=0.10,
        curve_number=82,
        manning_n=0.4,
        unit_system="si",
    )


@pytest.fixture
def sample_rainfall_series():
    """Serie de precipitación incremental de ejemplo (mm)."""
    return np.array([0.5, 1.2, 3.5, 8.2, 15.0, 12.0, 6.5, 3.0, 1.5, 0.8])


@pytest.fixture
def gamma_curve():
    """Curva adimensional Gamma con PRF 484."""
    return dimensionless_unit_hydrograph(timestep=0.1, num_hours=5.0, peak_rate_factor=484)


@pytest.fixture
def unit_hydrograph_m(gamma_curve):
    """Hidrograma unitario métrico para 10 km² y Tc = 2 hr."""
    return scale_unit_hydrograph(gamma_curve, 10.0, 2.0, UnitSystem.METRIC)


@pytest.fixture
def mixed_land_use():
    """Uso de suelo mixto que suma 1."""
    return LandUseProfile(
        agriculture=0.2,
        bare_rock=0.1,
        grassland=0.3,
        forest=0.3,
        moorland=0.1,
    )
