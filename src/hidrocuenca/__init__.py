"""
HidroCuenca - Respuesta hidrológica de cuencas.

Tiempo de concentración, hidrogramas unitarios, hidrogramas de crecida
SCS, modelo de balde de humedad del suelo y flujo subterráneo 1D.
"""

__version__ = "0.1.0"
