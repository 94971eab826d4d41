"""
Módulo de hidrogramas unitarios sintéticos.

Implementa:
- Hidrograma unitario adimensional Gamma (PRF)
- Escalado a hidrograma unitario dimensional (SCS)
- Convolución de exceso de lluvia (hidrograma de crecida)
"""

# Curva adimensional
from .dimensionless import (
    PEAK_RATE_FACTOR_SHAPE,
    gamma_shape,
    dimensionless_unit_hydrograph,
)

# Hidrograma unitario
from .unit import (
    scs_lag_time,
    scs_time_to_peak,
    scale_unit_hydrograph,
    resample_unit_hydrograph,
    hydrograph_volume,
)

# Convolución
from .convolution import (
    convolve_unit_hydrograph,
    flood_hydrograph,
)

__all__ = [
    # Adimensional
    "PEAK_RATE_FACTOR_SHAPE",
    "gamma_shape",
    "dimensionless_unit_hydrograph",
    # Unitario
    "scs_lag_time",
    "scs_time_to_peak",
    "scale_unit_hydrograph",
    "resample_unit_hydrograph",
    "hydrograph_volume",
    # Convolución
    "convolve_unit_hydrograph",
    "flood_hydrograph",
]
