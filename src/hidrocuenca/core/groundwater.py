"""
Flujo subterráneo 1D estacionario por diferencias finitas.

Resuelve -k·h'' = w0 + w1·x con condiciones de flujo en los bordes
(Molkentin, 2019). Si se fija la carga en el borde derecho se obtiene
un problema bien planteado; con flujo en ambos bordes la carga queda
indeterminada y el sistema es singular.
"""

import logging

import numpy as np

from hidrocuenca.config import GroundwaterResult
from hidrocuenca.core.linalg import matrix, solve_linear_system, vector

logger = logging.getLogger(__name__)


def assemble_groundwater_system(
    length: float,
    k: float,
    nodes: int,
    w0: float = 0.0,
    w1: float = 0.0,
    q0: float = 0.0,
    ql: float = 0.0,
    hl: float | None = None,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Arma la matriz y el vector del sistema de diferencias finitas.

    Nodos interiores:  (k/dx²)·(-h[i-1] + 2h[i] - h[i+1]) = w0 + w1·i·dx
    Borde izquierdo:   (k/dx)·(h[0] - h[1]) = q0
    Borde derecho:     (k/dx)·(h[n-2] - h[n-1]) = qL, o h[n-1] = hL

    Returns:
        Tupla (A, b)
    """
    if length <= 0:
        raise ValueError("Longitud debe ser > 0")
    if k <= 0:
        raise ValueError("Conductividad hidráulica debe ser > 0")
    if nodes < 3:
        raise ValueError("Se requieren al menos 3 nodos")

    dx = length / (nodes - 1)
    a = matrix(nodes, nodes)
    b = vector(nodes)

    factor = k / dx
    a[0, 0] = factor
    a[0, 1] = -factor
    b[0] = q0

    last = nodes - 1
    if hl is None:
        a[last, last] = -factor
        a[last, last - 1] = factor
        b[last] = ql
    else:
        a[last, last] = 1.0
        b[last] = hl

    inner = k / (dx * dx)
    for i in range(1, last):
        a[i, i] = 2 * inner
        a[i, i - 1] = -inner
        a[i, i + 1] = -inner
        b[i] = w0 + w1 * i * dx

    return a, b


def darcy_flux(head: np.ndarray, k: float, dx: float) -> np.ndarray:
    """
    Caudal específico q = -k·dh/dx.

    Diferencias centradas en nodos interiores, unilaterales en los bordes.
    """
    h = np.asarray(head, dtype=float)
    q = np.zeros_like(h)
    q[0] = -k * (h[1] - h[0]) / dx
    q[1:-1] = -k * (h[2:] - h[:-2]) / (2 * dx)
    q[-1] = -k * (h[-1] - h[-2]) / dx
    return q


def groundwater_1d(
    length: float,
    k: float,
    nodes: int,
    w0: float = 0.0,
    w1: float = 0.0,
    q0: float = 0.0,
    ql: float = 0.0,
    hl: float | None = None,
) -> GroundwaterResult:
    """
    Resuelve el flujo subterráneo 1D estacionario.

    Args:
        length: Longitud del dominio
        k: Conductividad hidráulica
        nodes: Número de nodos (>= 3)
        w0: Término fuente constante
        w1: Término fuente lineal (por unidad de x)
        q0: Flujo en el borde izquierdo
        ql: Flujo en el borde derecho (ignorado si se da hl)
        hl: Carga fija en el borde derecho (opcional)

    Returns:
        GroundwaterResult con posiciones, cargas y flujos

    Raises:
        SingularMatrix: Si el sistema no tiene solución única
    """
    a, b = assemble_groundwater_system(length, k, nodes, w0, w1, q0, ql, hl)
    dx = length / (nodes - 1)

    head = solve_linear_system(a, b)
    flux = darcy_flux(head, k, dx)

    logger.debug("Flujo subterráneo: %d nodos, dx=%.4f, h[0]=%.4f", nodes, dx, head[0])

    return GroundwaterResult(
        x=(np.arange(nodes) * dx).tolist(),
        head=head.tolist(),
        flux=flux.tolist(),
        dx=dx,
    )
