"""
Método SCS (NRCS lag) para tiempo de concentración.

Usa la retención potencial S derivada del número de curva.
"""

from hidrocuenca.config import UnitSystem, parse_unit_system
from hidrocuenca.core.runoff.scs import scs_potential_retention

from .constants import FT_PER_M, MM_PER_IN, SCS_TC_DIVISOR


def scs_tc(
    length: float,
    slope: float,
    cn: float,
    unit_system: UnitSystem | str = UnitSystem.METRIC,
) -> tuple[float, float]:
    """
    Calcula Tc usando la ecuación SCS.

    tc = L^0.8 × (S + 1)^0.7 / (1140 × Y^0.5)  [tc: hr, L: ft, S: in, Y: %]

    En sistema métrico la longitud (m) y la retención (mm) se convierten
    a pies y pulgadas antes de aplicar la ecuación.

    Args:
        length: Longitud hidráulica (pies en si, metros en métrico)
        slope: Pendiente media de la cuenca (m/m)
        cn: Número de curva
        unit_system: Sistema de unidades

    Returns:
        Tupla (tc_hr, S) con S en pulgadas (si) o mm (métrico)
    """
    units = parse_unit_system(unit_system)
    if length <= 0:
        raise ValueError("Longitud debe ser > 0")
    if slope <= 0:
        raise ValueError("Pendiente debe ser > 0")

    s = scs_potential_retention(cn, units)

    if units == UnitSystem.METRIC:
        length_ft = length * FT_PER_M
        s_in = s / MM_PER_IN
    else:
        length_ft = length
        s_in = s

    slope_pct = slope * 100
    tc_hr = (length_ft ** 0.8) * ((s_in + 1) ** 0.7) / (SCS_TC_DIVISOR * slope_pct ** 0.5)
    return tc_hr, s
