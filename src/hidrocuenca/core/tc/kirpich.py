"""
Método Kirpich (1940) para tiempo de concentración.

Desarrollado para pequeñas cuencas agrícolas en Tennessee.
"""

from hidrocuenca.config import UnitSystem, parse_unit_system

from .constants import KIRPICH_K


def kirpich(
    length: float,
    slope: float,
    unit_system: UnitSystem | str = UnitSystem.METRIC,
) -> float:
    """
    Calcula Tc usando fórmula Kirpich (1940).

    tc = K × L^0.77 × S^(-0.385)  [tc: min, S: m/m]

    K = 0.0078 con L en pies, 0.0195 con L en metros.

    Args:
        length: Longitud del cauce principal (pies o metros)
        slope: Pendiente media del cauce (m/m)
        unit_system: Sistema de unidades

    Returns:
        Tiempo de concentración en horas
    """
    units = parse_unit_system(unit_system)
    if length <= 0:
        raise ValueError("Longitud debe ser > 0")
    if slope <= 0:
        raise ValueError("Pendiente debe ser > 0")

    tc_min = KIRPICH_K[units] * (length ** 0.77) * (slope ** -0.385)
    return tc_min / 60.0
