"""
Álgebra lineal densa.

Incluye:
- matrix / vector: construcción de arreglos con valor de relleno
- solve_linear_system: eliminación gaussiana con pivoteo parcial
- residual_norm: verificación de la solución
"""

import logging

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hidrocuenca.config import PIVOT_TOLERANCE
from hidrocuenca.exceptions import ShapeMismatch, SingularMatrix

logger = logging.getLogger(__name__)


def matrix(rows: int, cols: int, fill: float = 0.0) -> NDArray[np.floating]:
    """
    Crea una matriz rows × cols rellena con un valor.

    Cada llamada devuelve un arreglo nuevo; las filas no comparten memoria.
    """
    if rows < 0 or cols < 0:
        raise ValueError("Dimensiones de matriz deben ser >= 0")
    return np.full((rows, cols), fill, dtype=float)


def vector(size: int, fill: float = 0.0) -> NDArray[np.floating]:
    """Crea un vector de tamaño size relleno con un valor."""
    if size < 0:
        raise ValueError("Tamaño de vector debe ser >= 0")
    return np.full(size, fill, dtype=float)


def solve_linear_system(
    a: ArrayLike,
    b: ArrayLike,
    tolerance: float = PIVOT_TOLERANCE,
) -> NDArray[np.floating]:
    """
    Resuelve A·x = b por eliminación gaussiana con pivoteo parcial.

    Para cada columna k se elige la fila i >= k con mayor |A[i, k]| y se
    intercambia con la fila k (en A y en b). Luego se elimina por debajo
    del pivote y se aplica sustitución regresiva:

        x[k] = (b[k] - Σ_{i>k} A[k, i]·x[i]) / A[k, k]

    Los arreglos de entrada no se modifican.

    Args:
        a: Matriz cuadrada n × n
        b: Vector de términos independientes (n)
        tolerance: Magnitud mínima aceptada para el pivote

    Returns:
        Vector solución x (n)

    Raises:
        ValueError: Si A o b contienen NaN o infinitos
        ShapeMismatch: Si A no es cuadrada o b no tiene n elementos
        SingularMatrix: Si algún pivote es menor que la tolerancia
    """
    a = np.array(a, dtype=float)
    b = np.array(b, dtype=float)
    if not (np.all(np.isfinite(a)) and np.all(np.isfinite(b))):
        raise ValueError("La matriz y el vector deben contener valores finitos")

    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        rows = a.shape[0] if a.ndim >= 1 else 0
        cols = a.shape[1] if a.ndim == 2 else 0
        raise ShapeMismatch("filas", rows, "columnas", cols)
    n = a.shape[0]
    if b.shape != (n,):
        raise ShapeMismatch("matriz", n, "vector", b.size)

    # Eliminación hacia adelante
    for k in range(n):
        m = k + int(np.argmax(np.abs(a[k:, k])))
        if m != k:
            a[[k, m], k:] = a[[m, k], k:]
            b[[k, m]] = b[[m, k]]
            logger.debug("Pivoteo: fila %d <-> fila %d", k, m)

        pivot = a[k, k]
        if abs(pivot) < tolerance:
            raise SingularMatrix(k, float(pivot))

        for j in range(k + 1, n):
            factor = -a[j, k] / pivot
            a[j, k:] += factor * a[k, k:]
            b[j] += factor * b[k]

    # Sustitución regresiva
    x = np.zeros(n)
    for k in range(n - 1, -1, -1):
        x[k] = (b[k] - np.dot(a[k, k + 1:], x[k + 1:])) / a[k, k]

    return x


def residual_norm(a: ArrayLike, x: ArrayLike, b: ArrayLike) -> float:
    """Norma máxima del residuo |A·x - b|."""
    r = np.asarray(a, dtype=float) @ np.asarray(x, dtype=float) - np.asarray(b, dtype=float)
    return float(np.max(np.abs(r))) if r.size else 0.0
