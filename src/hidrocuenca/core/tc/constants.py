"""
Constantes para cálculos de tiempo de concentración.

Coeficientes por sistema de unidades y factores de conversión.
"""

from hidrocuenca.config import UnitSystem

# Conversión de unidades
FT_PER_M = 3.28084
MM_PER_IN = 25.4

# Factores Tp/Tc y tlag/Tc
TIME_TO_PEAK_RATIO = 0.7
LAG_RATIO = 0.6

# Kirpich: tc[min] = K × L^0.77 × S^(-0.385)
KIRPICH_K = {
    UnitSystem.SI: 0.0078,      # L en pies
    UnitSystem.METRIC: 0.0195,  # L en metros
}

# Kerby: tc[min] = K × (n × L / S^0.5)^0.467
KERBY_K = {
    UnitSystem.SI: 0.828,       # L en pies
    UnitSystem.METRIC: 1.44,    # L en metros
}

# SCS: tc[hr] = L^0.8 × (S + 1)^0.7 / (1140 × Y^0.5)  [L: ft, S: in, Y: %]
SCS_TC_DIVISOR = 1140.0
