"""
Módulo de cálculo de escorrentía.

Implementa:
- Método SCS Curve Number (CN)
- Modelo de balde de humedad del suelo
"""

# SCS-CN
from .scs import (
    scs_potential_retention,
    scs_initial_abstraction,
    scs_runoff,
    cumulative_rainfall,
    incremental_runoff,
    rainfall_excess_series,
)

# Modelo de balde
from .bucket import bucket_model

__all__ = [
    # SCS-CN
    "scs_potential_retention",
    "scs_initial_abstraction",
    "scs_runoff",
    "cumulative_rainfall",
    "incremental_runoff",
    "rainfall_excess_series",
    # Balde
    "bucket_model",
]
