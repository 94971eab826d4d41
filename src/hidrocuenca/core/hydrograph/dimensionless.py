"""
Hidrograma unitario adimensional tipo Gamma (NEH, 2007).

La forma se selecciona con el Peak Rate Factor (PRF): valores bajos
para cuencas planas, altos para terreno escarpado.
"""

import logging

import numpy as np

from hidrocuenca.config import DimensionlessCurve, HydrographDistribution
from hidrocuenca.exceptions import UnsupportedDistribution, UnsupportedMethod

logger = logging.getLogger(__name__)


# Parámetro de forma m por Peak Rate Factor
PEAK_RATE_FACTOR_SHAPE = {
    101: 0.26,
    238: 1.0,
    349: 2.0,
    433: 3.0,
    484: 3.7,
    504: 4.0,
    566: 5.0,
}


def gamma_shape(peak_rate_factor: int) -> float:
    """
    Obtiene el parámetro de forma m para un PRF tabulado.

    Raises:
        UnsupportedDistribution: Si el PRF no está en la tabla
    """
    if peak_rate_factor not in PEAK_RATE_FACTOR_SHAPE:
        raise UnsupportedDistribution(peak_rate_factor, PEAK_RATE_FACTOR_SHAPE)
    return PEAK_RATE_FACTOR_SHAPE[peak_rate_factor]


def dimensionless_unit_hydrograph(
    timestep: float = 0.1,
    num_hours: float = 5.0,
    peak_rate_factor: int = 484,
    distribution: HydrographDistribution | str = HydrographDistribution.GAMMA,
) -> DimensionlessCurve:
    """
    Genera el hidrograma unitario adimensional.

    q/qp = e^m × (t/Tp)^m × e^(-m × t/Tp)

    Args:
        timestep: Incremento de t/Tp entre muestras (>= 0.01)
        num_hours: Duración total en múltiplos de Tp
        peak_rate_factor: PRF (101, 238, 349, 433, 484, 504, 566)
        distribution: Distribución de forma (solo 'gamma')

    Returns:
        DimensionlessCurve que comienza en (0, 0)
    """
    try:
        distribution = HydrographDistribution(distribution)
    except ValueError:
        raise UnsupportedMethod(distribution, [d.value for d in HydrographDistribution]) from None
    if timestep < 0.01:
        raise ValueError("Incremento t/Tp debe ser >= 0.01")
    if num_hours <= 0:
        raise ValueError("Duración debe ser > 0")

    m = gamma_shape(peak_rate_factor)
    n_steps = int(round(num_hours / timestep)) + 1

    t_tp = np.round(np.arange(n_steps) * timestep, 2)

    # e^m × t^m × e^(-m t) = t^m × e^(m (1 - t))
    with np.errstate(over="ignore", invalid="ignore"):
        q_qp = (t_tp ** m) * np.exp(m * (1 - t_tp))
    q_qp = np.round(np.nan_to_num(q_qp, nan=0.0, posinf=0.0, neginf=0.0), 3)

    logger.debug("HU adimensional: PRF=%s, m=%.2f, %d puntos", peak_rate_factor, m, n_steps)

    return DimensionlessCurve(
        ratio_t=t_tp.tolist(),
        ratio_q=q_qp.tolist(),
        peak_rate_factor=peak_rate_factor,
        shape_m=m,
    )
