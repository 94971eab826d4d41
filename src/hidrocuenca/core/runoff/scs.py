"""
Método SCS Curve Number (CN).

Retención potencial, abstracción inicial y escorrentía directa
sobre precipitación acumulada.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hidrocuenca.config import (
    INITIAL_ABSTRACTION_RATIO,
    UnitSystem,
    parse_unit_system,
)


def scs_potential_retention(
    cn: float,
    unit_system: UnitSystem | str = UnitSystem.METRIC,
) -> float:
    """
    Calcula retención potencial máxima S.

    S = 1000 / CN - 10     [pulgadas, si]
    S = 25400 / CN - 254   [mm, métrico]

    Args:
        cn: Número de curva (0-100]
        unit_system: Sistema de unidades

    Returns:
        Retención potencial S
    """
    units = parse_unit_system(unit_system)
    if not 0 < cn <= 100:
        raise ValueError("CN debe estar entre 0 y 100")

    if units == UnitSystem.SI:
        return 1000 / cn - 10
    return 25400 / cn - 254


def scs_initial_abstraction(
    s: float,
    lambda_coef: float = INITIAL_ABSTRACTION_RATIO,
) -> float:
    """
    Calcula abstracción inicial Ia.

    Ia = λ × S
    """
    return lambda_coef * s


def scs_runoff(
    rainfall: float | ArrayLike,
    cn: float,
    unit_system: UnitSystem | str = UnitSystem.METRIC,
    lambda_coef: float = INITIAL_ABSTRACTION_RATIO,
) -> float | NDArray[np.floating]:
    """
    Calcula escorrentía directa usando método SCS-CN.

    Q = (P - Ia)² / (P - Ia + S)  para P > Ia
    Q = 0  para P ≤ Ia

    Args:
        rainfall: Precipitación acumulada (escalar o array)
        cn: Número de curva
        unit_system: Sistema de unidades (pulgadas o mm)
        lambda_coef: Coeficiente λ para Ia

    Returns:
        Escorrentía directa acumulada
    """
    P = np.asarray(rainfall, dtype=float)
    S = scs_potential_retention(cn, unit_system)
    Ia = scs_initial_abstraction(S, lambda_coef)

    excess = np.maximum(P - Ia, 0.0)
    with np.errstate(divide="ignore", invalid="ignore"):
        Q = np.where(P > Ia, excess ** 2 / (excess + S), 0.0)

    if np.isscalar(rainfall):
        return float(Q)
    return Q


def cumulative_rainfall(rainfall: ArrayLike) -> NDArray[np.floating]:
    """Precipitación acumulada (suma corrida)."""
    return np.cumsum(np.asarray(rainfall, dtype=float))


def incremental_runoff(
    cumulative_runoff: ArrayLike,
    decimals: int | None = 3,
) -> NDArray[np.floating]:
    """
    Escorrentía incremental por intervalo.

    ΔQ[i] = |Q[i] - Q[i-1]|, con Q[-1] = 0

    Args:
        cumulative_runoff: Escorrentía acumulada
        decimals: Decimales de redondeo (None = sin redondeo)

    Returns:
        Array de escorrentía incremental
    """
    Q = np.asarray(cumulative_runoff, dtype=float)
    excess = np.abs(np.diff(Q, prepend=0.0))
    if decimals is not None:
        excess = np.round(excess, decimals)
    return excess


def rainfall_excess_series(
    rainfall: ArrayLike,
    cn: float,
    unit_system: UnitSystem | str = UnitSystem.METRIC,
    lambda_coef: float = INITIAL_ABSTRACTION_RATIO,
) -> NDArray[np.floating]:
    """
    Calcula serie de exceso de lluvia a partir de lluvia incremental.

    Acumula la precipitación, aplica SCS-CN y obtiene el incremento.
    """
    cumulative_runoff = scs_runoff(cumulative_rainfall(rainfall), cn, unit_system, lambda_coef)
    return incremental_runoff(cumulative_runoff)
