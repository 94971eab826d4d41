"""
Método Kerby (1959) para flujo laminar sobre superficies.

Ambos sistemas usan tc = K × (n × L / S^0.5)^0.467. En unidades imperiales
K = 0.828 reemplaza a la variante (2.2 × n × L / (S/100)^0.5)^0.324, de modo
que una misma cuenca en pies o en metros da el mismo Tc.
"""

from hidrocuenca.config import UnitSystem, parse_unit_system

from .constants import KERBY_K


def kerby(
    length: float,
    slope: float,
    manning_n: float,
    unit_system: UnitSystem | str = UnitSystem.METRIC,
) -> float:
    """
    Calcula Tc usando fórmula Kerby.

    tc = K × (n × L / S^0.5)^0.467  [tc: min, S: m/m]

    K = 0.828 con L en pies, 1.44 con L en metros.

    Args:
        length: Longitud del flujo (pies o metros)
        slope: Pendiente (m/m)
        manning_n: Coeficiente de retardo (Manning)
        unit_system: Sistema de unidades

    Returns:
        Tiempo de concentración en horas
    """
    units = parse_unit_system(unit_system)
    if length <= 0:
        raise ValueError("Longitud debe ser > 0")
    if slope <= 0:
        raise ValueError("Pendiente debe ser > 0")
    if manning_n <= 0:
        raise ValueError("Coeficiente n debe ser > 0")

    tc_min = KERBY_K[units] * ((manning_n * length / slope ** 0.5) ** 0.467)
    return tc_min / 60.0
