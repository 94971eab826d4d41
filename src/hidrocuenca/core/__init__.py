"""Módulos de cálculo hidrológico."""

from hidrocuenca.core.linalg import (
    matrix,
    vector,
    solve_linear_system,
    residual_norm,
)

from hidrocuenca.core.tc import (
    scs_tc,
    kirpich,
    kerby,
    calculate_time_parameters,
    basin_time_parameters,
)

from hidrocuenca.core.runoff import (
    scs_potential_retention,
    scs_initial_abstraction,
    scs_runoff,
    cumulative_rainfall,
    incremental_runoff,
    rainfall_excess_series,
    bucket_model,
)

from hidrocuenca.core.hydrograph import (
    PEAK_RATE_FACTOR_SHAPE,
    gamma_shape,
    dimensionless_unit_hydrograph,
    scs_lag_time,
    scs_time_to_peak,
    scale_unit_hydrograph,
    resample_unit_hydrograph,
    hydrograph_volume,
    convolve_unit_hydrograph,
    flood_hydrograph,
)

from hidrocuenca.core.groundwater import (
    assemble_groundwater_system,
    darcy_flux,
    groundwater_1d,
)

from hidrocuenca.core.precipitation import (
    total_precipitation,
    arithmetic_mean_precipitation,
    thiessen_precipitation,
    aggregate_rainfall,
    disaggregate_rainfall,
)

__all__ = [
    # Álgebra lineal
    "matrix",
    "vector",
    "solve_linear_system",
    "residual_norm",
    # Tiempo de concentración
    "scs_tc",
    "kirpich",
    "kerby",
    "calculate_time_parameters",
    "basin_time_parameters",
    # Escorrentía
    "scs_potential_retention",
    "scs_initial_abstraction",
    "scs_runoff",
    "cumulative_rainfall",
    "incremental_runoff",
    "rainfall_excess_series",
    "bucket_model",
    # Hidrogramas
    "PEAK_RATE_FACTOR_SHAPE",
    "gamma_shape",
    "dimensionless_unit_hydrograph",
    "scs_lag_time",
    "scs_time_to_peak",
    "scale_unit_hydrograph",
    "resample_unit_hydrograph",
    "hydrograph_volume",
    "convolve_unit_hydrograph",
    "flood_hydrograph",
    # Flujo subterráneo
    "assemble_groundwater_system",
    "darcy_flux",
    "groundwater_1d",
    # Precipitación
    "total_precipitation",
    "arithmetic_mean_precipitation",
    "thiessen_precipitation",
    "aggregate_rainfall",
    "disaggregate_rainfall",
]
