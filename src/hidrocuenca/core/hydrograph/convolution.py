"""
Convolución de exceso de lluvia con hidrograma unitario.

Incluye:
- convolve_unit_hydrograph: convolución discreta (superposición)
- flood_hydrograph: hidrograma de crecida desde lluvia incremental
"""

import logging
from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from hidrocuenca.config import (
    FloodHydrograph,
    TimeSeries,
    UnitHydrograph,
    UnitSystem,
    parse_unit_system,
)
from hidrocuenca.core.runoff.scs import (
    cumulative_rainfall,
    incremental_runoff,
    scs_runoff,
)
from hidrocuenca.exceptions import ShapeMismatch

from .unit import hydrograph_volume

logger = logging.getLogger(__name__)


def convolve_unit_hydrograph(
    rainfall_excess: ArrayLike,
    unit_hydrograph: ArrayLike,
) -> NDArray[np.floating]:
    """
    Convolución discreta de exceso de lluvia con hidrograma unitario.

    Qn = Σ(m=1 to M) [Pm × U(n-m+1)]

    Cada intervalo h de la tormenta aporta la respuesta unitaria escalada
    por su exceso y desplazada h muestras.

    Args:
        rainfall_excess: Exceso de lluvia incremental
        unit_hydrograph: Ordenadas del hidrograma unitario

    Returns:
        Hidrograma compuesto (len(excess) + len(uh) - 1 muestras)
    """
    excess = np.asarray(rainfall_excess, dtype=float)
    ordinates = np.asarray(unit_hydrograph, dtype=float)
    if excess.size == 0 or ordinates.size == 0:
        return np.zeros(0)
    return np.convolve(excess, ordinates, mode="full")


def flood_hydrograph(
    rainfall: TimeSeries | Sequence[float],
    unit_hydrograph: UnitHydrograph,
    curve_number: float,
    storm_duration: float,
    timestep: float,
    unit_system: UnitSystem | str = UnitSystem.METRIC,
) -> FloodHydrograph:
    """
    Genera hidrograma de crecida por el método SCS.

    1. Precipitación acumulada
    2. Escorrentía acumulada SCS-CN (Ia = 0.2 × S)
    3. Escorrentía incremental |Q[i] - Q[i-1]|
    4. Convolución con las ordenadas del HU

    El resultado tiene (duración / Δt) + len(HU) muestras, con tiempos
    Δt, 2Δt, ... (final de cada intervalo).

    Args:
        rainfall: Lluvia incremental (pulgadas en si, mm en métrico)
        unit_hydrograph: Hidrograma unitario
        curve_number: Número de curva
        storm_duration: Duración de la tormenta (hr)
        timestep: Intervalo de la serie de lluvia (hr)
        unit_system: Sistema de unidades

    Returns:
        FloodHydrograph con la serie de caudales y su resumen
    """
    units = parse_unit_system(unit_system)
    if timestep <= 0:
        raise ValueError("Intervalo de tiempo debe ser > 0")
    if storm_duration <= 0:
        raise ValueError("Duración de tormenta debe ser > 0")

    if isinstance(rainfall, TimeSeries):
        rain = rainfall.values_array()
    else:
        rain = np.array(rainfall, dtype=float)

    n_storm = int(round(storm_duration / timestep))
    if n_storm < 1:
        raise ValueError("La tormenta debe cubrir al menos un intervalo")
    if not unit_hydrograph.flow:
        raise ValueError("Hidrograma unitario vacío")
    if rain.size < n_storm:
        raise ShapeMismatch("rainfall", rain.size, "storm_steps", n_storm)
    rain = rain[:n_storm]

    p_cum = cumulative_rainfall(rain)
    q_cum = scs_runoff(p_cum, curve_number, units)
    excess = incremental_runoff(q_cum)

    ordinates = np.asarray(unit_hydrograph.flow, dtype=float)
    n_total = n_storm + ordinates.size

    flow = np.zeros(n_total)
    composite = convolve_unit_hydrograph(excess, ordinates)
    flow[:composite.size] = composite
    flow = np.round(flow, 3)

    # Cada ordenada se asigna al final de su intervalo
    time_raw = (np.arange(n_total) + 1) * timestep
    time = np.round(time_raw, 2)

    peak_idx = int(np.argmax(flow))
    logger.debug(
        "Hidrograma de crecida: %d intervalos de tormenta, %d ordenadas HU, pico=%.3f",
        n_storm, ordinates.size, float(flow[peak_idx]),
    )

    return FloodHydrograph(
        time_hr=time.tolist(),
        flow=flow.tolist(),
        excess=excess.tolist(),
        cumulative_rainfall=p_cum.tolist(),
        cumulative_runoff=q_cum.tolist(),
        peak_flow=float(flow[peak_idx]),
        time_to_peak_hr=float(time[peak_idx]),
        volume=hydrograph_volume(time_raw, flow),
        unit_system=units,
    )
