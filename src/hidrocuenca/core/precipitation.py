"""
Precipitación areal y agregación temporal de lluvia.

Incluye:
- total_precipitation: total de un evento
- arithmetic_mean_precipitation: media aritmética entre pluviómetros
- thiessen_precipitation: media ponderada por polígonos de Thiessen
- aggregate_rainfall / disaggregate_rainfall: cambio de intervalo
"""

import logging
from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hidrocuenca.config import TimeSeries
from hidrocuenca.exceptions import ShapeMismatch

logger = logging.getLogger(__name__)


def total_precipitation(values: ArrayLike) -> float:
    """Suma aritmética de la precipitación de un evento."""
    return float(np.sum(np.asarray(values, dtype=float)))


def _gauge_matrix(gauges: Sequence[Sequence[float]]) -> NDArray[np.floating]:
    """Convierte registros de pluviómetros a matriz (estaciones × pasos)."""
    lengths = {len(g) for g in gauges}
    if len(lengths) > 1:
        sizes = sorted(lengths)
        raise ShapeMismatch("registro_min", sizes[0], "registro_max", sizes[-1])
    if len(gauges) == 0:
        raise ValueError("Se requiere al menos un pluviómetro")
    return np.array(gauges, dtype=float)


def arithmetic_mean_precipitation(
    gauges: Sequence[Sequence[float]],
) -> NDArray[np.floating]:
    """
    Precipitación media areal por media aritmética.

    P̄[t] = Σ Pᵢ[t] / N

    Args:
        gauges: Registros de cada pluviómetro, todos de igual longitud

    Returns:
        Serie de precipitación media
    """
    data = _gauge_matrix(gauges)
    return data.mean(axis=0)


def thiessen_precipitation(
    gauges: Sequence[Sequence[float]],
    areas: Sequence[float],
) -> NDArray[np.floating]:
    """
    Precipitación media areal por polígonos de Thiessen.

    P̄[t] = Σ(Pᵢ[t] × Aᵢ) / Σ Aᵢ

    Args:
        gauges: Registros de cada pluviómetro (uno por subcuenca)
        areas: Área del polígono de cada pluviómetro

    Returns:
        Serie de precipitación media ponderada
    """
    data = _gauge_matrix(gauges)
    weights = np.asarray(areas, dtype=float)
    if weights.size != data.shape[0]:
        raise ShapeMismatch("gauges", data.shape[0], "areas", weights.size)
    if np.any(weights < 0):
        raise ValueError("Las áreas no pueden ser negativas")

    total_area = weights.sum()
    if total_area == 0:
        raise ValueError("Área total no puede ser cero")

    return weights @ data / total_area


def _series_step(series: TimeSeries) -> float:
    if len(series) < 2:
        raise ValueError("La serie requiere al menos dos valores")
    steps = np.diff(series.time)
    if not np.allclose(steps, steps[0]):
        raise ValueError("La serie debe tener paso de tiempo constante")
    return float(steps[0])


def aggregate_rainfall(series: TimeSeries, interval: float) -> TimeSeries:
    """
    Agrega lluvia a un intervalo mayor sumando bloques consecutivos.

    El intervalo debe ser múltiplo del paso de la serie. Un bloque final
    incompleto se suma igualmente.

    Args:
        series: Serie de lluvia con paso constante
        interval: Nuevo intervalo (mismas unidades que series.time)

    Returns:
        Serie agregada con el tiempo de inicio de cada bloque
    """
    step = _series_step(series)
    ratio = interval / step
    count = int(round(ratio))
    if count < 1 or not np.isclose(ratio, count):
        raise ValueError("El intervalo debe ser múltiplo del paso de la serie")

    values = series.values_array()
    starts = np.arange(0, values.size, count)
    totals = np.add.reduceat(values, starts)
    time = np.asarray(series.time)[starts]

    logger.debug("Agregación: %d valores -> %d bloques de %d", values.size, totals.size, count)
    return TimeSeries(time=time.tolist(), value=totals.tolist())


def disaggregate_rainfall(series: TimeSeries, interval: float) -> TimeSeries:
    """
    Desagrega lluvia a un intervalo menor repartiendo uniformemente.

    Args:
        series: Serie de lluvia con paso constante
        interval: Nuevo intervalo; el paso de la serie debe ser múltiplo

    Returns:
        Serie desagregada, conserva el total
    """
    step = _series_step(series)
    ratio = step / interval if interval > 0 else 0.0
    count = int(round(ratio))
    if count < 1 or not np.isclose(ratio, count):
        raise ValueError("El paso de la serie debe ser múltiplo del intervalo")

    values = np.repeat(series.values_array() / count, count)
    time = np.asarray(series.time[0]) + np.arange(values.size) * interval
    return TimeSeries(time=np.round(time, 9).tolist(), value=values.tolist())
