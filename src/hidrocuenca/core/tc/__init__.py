"""
Módulo de tiempo de concentración (Tc).

Implementa tres métodos empíricos:
- SCS (NRCS lag)
- Kirpich (1940)
- Kerby (1959)

Todos reportan Tc, tiempo al pico (0.7×Tc) y tiempo de retardo (0.6×Tc).
"""

import logging

from hidrocuenca.config import (
    BasinParameters,
    TCMethod,
    TimeParameters,
    UnitSystem,
    parse_unit_system,
)
from hidrocuenca.exceptions import UnsupportedMethod

# Constantes
from .constants import (
    FT_PER_M,
    MM_PER_IN,
    KIRPICH_K,
    KERBY_K,
    LAG_RATIO,
    TIME_TO_PEAK_RATIO,
)

from .scs import scs_tc
from .kirpich import kirpich
from .kerby import kerby

logger = logging.getLogger(__name__)


def _parse_method(method: TCMethod | str) -> TCMethod:
    if isinstance(method, TCMethod):
        return method
    try:
        return TCMethod(str(method).strip().lower())
    except ValueError:
        raise UnsupportedMethod(method, [m.value for m in TCMethod]) from None


def calculate_time_parameters(
    method: TCMethod | str,
    unit_system: UnitSystem | str,
    length: float,
    slope: float,
    curve_number: float | None = None,
    manning_n: float | None = None,
) -> TimeParameters:
    """
    Función principal para calcular parámetros temporales de la cuenca.

    Args:
        method: Método de cálculo ('scs', 'kirpich', 'kerby')
        unit_system: Sistema de unidades ('si', 'm')
        length: Longitud (pies en si, metros en métrico)
        slope: Pendiente (m/m)
        curve_number: Número de curva (requerido por SCS)
        manning_n: Coeficiente de Manning (requerido por Kerby)

    Returns:
        TimeParameters con Tc, Tp, tlag y, para SCS, la retención máxima
    """
    method = _parse_method(method)
    units = parse_unit_system(unit_system)
    max_retention = None

    if method == TCMethod.SCS:
        if curve_number is None:
            raise ValueError("SCS requiere curve_number")
        tc, max_retention = scs_tc(length, slope, curve_number, units)

    elif method == TCMethod.KIRPICH:
        tc = kirpich(length, slope, units)

    elif method == TCMethod.KERBY:
        if manning_n is None:
            raise ValueError("Kerby requiere manning_n")
        tc = kerby(length, slope, manning_n, units)

    else:
        raise UnsupportedMethod(method, [m.value for m in TCMethod])

    logger.debug("Tc (%s, %s) = %.4f hr", method.value, units.value, tc)

    return TimeParameters(
        method=method,
        unit_system=units,
        tc_hr=tc,
        tp_hr=TIME_TO_PEAK_RATIO * tc,
        lag_hr=LAG_RATIO * tc,
        max_retention=max_retention,
    )


def basin_time_parameters(
    basin: BasinParameters,
    method: TCMethod | str,
) -> TimeParameters:
    """Calcula parámetros temporales desde un BasinParameters."""
    return calculate_time_parameters(
        method,
        basin.unit_system,
        basin.length,
        basin.slope,
        curve_number=basin.curve_number,
        manning_n=basin.manning_n,
    )


__all__ = [
    # Constantes
    "FT_PER_M",
    "MM_PER_IN",
    "KIRPICH_K",
    "KERBY_K",
    "LAG_RATIO",
    "TIME_TO_PEAK_RATIO",
    # Métodos
    "scs_tc",
    "kirpich",
    "kerby",
    # Dispatcher
    "calculate_time_parameters",
    "basin_time_parameters",
]
