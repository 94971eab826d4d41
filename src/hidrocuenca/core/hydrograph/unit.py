"""
Hidrograma unitario dimensional a partir de la curva adimensional.

Incluye:
- scs_lag_time / scs_time_to_peak: parámetros temporales SCS
- scale_unit_hydrograph: escala t/Tp y q/qp a valores absolutos
- resample_unit_hydrograph: interpola las ordenadas a un paso regular
- hydrograph_volume: integral trapezoidal de un hidrograma
"""

import logging

import numpy as np
from numpy.typing import ArrayLike

from hidrocuenca.config import (
    UH_PEAK_CONSTANT,
    DimensionlessCurve,
    UnitHydrograph,
    UnitSystem,
    parse_unit_system,
)

logger = logging.getLogger(__name__)


def scs_lag_time(tc_hr: float) -> float:
    """
    Calcula tiempo de retardo SCS.

    tlag = 0.6 × Tc
    """
    return 0.6 * tc_hr


def scs_time_to_peak(tc_hr: float, dt_hr: float) -> float:
    """
    Calcula tiempo al pico SCS.

    Tp = ΔD/2 + tlag = ΔD/2 + 0.6×Tc

    Args:
        tc_hr: Tiempo de concentración en horas
        dt_hr: Duración del intervalo de exceso de lluvia (horas)

    Returns:
        Tiempo al pico en horas
    """
    return dt_hr / 2 + scs_lag_time(tc_hr)


def scale_unit_hydrograph(
    curve: DimensionlessCurve,
    area: float,
    tc_hr: float,
    unit_system: UnitSystem | str = UnitSystem.METRIC,
) -> UnitHydrograph:
    """
    Escala el hidrograma adimensional a un hidrograma unitario.

    ΔD = 0.133 × Tc
    Tp = ΔD/2 + 0.6 × Tc
    qp = C × A / Tp   [C = 484 (si: mi², cfs/pulg) o 0.208 (m: km², m³/s/mm)]

    Args:
        curve: Curva adimensional (t/Tp, q/qp)
        area: Área de drenaje (mi² en si, km² en métrico)
        tc_hr: Tiempo de concentración en horas
        unit_system: Sistema de unidades

    Returns:
        UnitHydrograph con tiempo (hr) y caudal por unidad de escorrentía
    """
    units = parse_unit_system(unit_system)
    if area <= 0:
        raise ValueError("Área debe ser > 0")
    if tc_hr <= 0:
        raise ValueError("Tiempo de concentración debe ser > 0")

    dt_hr = round(0.133 * tc_hr, 3)
    tp = scs_time_to_peak(tc_hr, dt_hr)
    qp = UH_PEAK_CONSTANT[units] * area / tp

    time = np.round(np.asarray(curve.ratio_t) * tp, 3)
    flow = np.round(np.asarray(curve.ratio_q) * qp, 3)

    logger.debug("HU: ΔD=%.3f hr, Tp=%.4f hr, qp=%.4f", dt_hr, tp, qp)

    return UnitHydrograph(
        time_hr=time.tolist(),
        flow=flow.tolist(),
        tp_hr=tp,
        qp=qp,
        dt_hr=dt_hr,
        unit_system=units,
    )


def resample_unit_hydrograph(uh: UnitHydrograph, dt_hr: float) -> UnitHydrograph:
    """
    Interpola las ordenadas del HU a un paso de tiempo regular.

    Necesario para convolucionar con una serie de lluvia cuyo intervalo
    difiere del espaciado de la curva adimensional.

    Args:
        uh: Hidrograma unitario
        dt_hr: Nuevo intervalo en horas

    Returns:
        UnitHydrograph con tiempos 0, dt, 2dt, ... hasta el tiempo base
    """
    if dt_hr <= 0:
        raise ValueError("Intervalo debe ser > 0")

    t_base = uh.time_hr[-1]
    n_points = int(np.floor(t_base / dt_hr + 1e-9)) + 1
    time = np.arange(n_points) * dt_hr
    flow = np.interp(time, uh.time_hr, uh.flow, right=0.0)

    return UnitHydrograph(
        time_hr=np.round(time, 6).tolist(),
        flow=np.round(flow, 3).tolist(),
        tp_hr=uh.tp_hr,
        qp=uh.qp,
        dt_hr=dt_hr,
        unit_system=uh.unit_system,
    )


def hydrograph_volume(time_hr: ArrayLike, flow: ArrayLike) -> float:
    """
    Integra un hidrograma por regla trapezoidal.

    Returns:
        Volumen en unidades de caudal × hora
    """
    return float(np.trapezoid(np.asarray(flow, dtype=float), np.asarray(time_hr, dtype=float)))
