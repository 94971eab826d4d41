"""Modelos Pydantic para configuración y validación de datos."""

from enum import Enum
from typing import Optional

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from hidrocuenca.exceptions import InvalidUnitSystem, ShapeMismatch


class UnitSystem(str, Enum):
    """
    Sistema de unidades.

    - SI: unidades imperiales (pies, pulgadas, mi², cfs)
    - METRIC: unidades métricas (m, mm, km², m³/s)
    """
    SI = "si"
    METRIC = "m"


class TCMethod(str, Enum):
    """Métodos de tiempo de concentración."""
    SCS = "scs"
    KIRPICH = "kirpich"
    KERBY = "kerby"


class HydrographDistribution(str, Enum):
    """Distribuciones para el hidrograma adimensional."""
    GAMMA = "gamma"


def parse_unit_system(value: "UnitSystem | str") -> UnitSystem:
    """
    Convierte un identificador de unidades a UnitSystem.

    Args:
        value: UnitSystem o texto ('si', 'm')

    Returns:
        UnitSystem correspondiente

    Raises:
        InvalidUnitSystem: Si el identificador no es reconocido
    """
    if isinstance(value, UnitSystem):
        return value
    try:
        return UnitSystem(str(value).strip().lower())
    except ValueError:
        raise InvalidUnitSystem(value) from None


# ============================================================================
# Constantes
# ============================================================================

# Umbral de pivote para eliminación gaussiana
PIVOT_TOLERANCE = 1e-10

# Coeficiente λ de abstracción inicial (Ia = λ × S)
INITIAL_ABSTRACTION_RATIO = 0.2

# Constante de caudal pico del HU: qp = C × A / tp
UH_PEAK_CONSTANT = {
    UnitSystem.SI: 484.0,     # cfs por pulgada, A en mi²
    UnitSystem.METRIC: 0.208,  # m³/s por mm, A en km²
}

# Capacidad de campo por clase de uso de suelo (modelo de balde)
FIELD_CAPACITIES = {
    "agriculture": 5.0,
    "bare_rock": 50.0,
    "grassland": 25.0,
    "forest": 25.0,
    "moorland": 5.0,
}

LAND_USE_CLASSES = tuple(FIELD_CAPACITIES)


# ============================================================================
# Series temporales
# ============================================================================

class TimeSeries(BaseModel):
    """Serie temporal de pares (tiempo, valor) con base de tiempo común."""
    time: list[float] = Field(..., description="Tiempo (estrictamente creciente)")
    value: list[float] = Field(..., description="Valores")

    @model_validator(mode="after")
    def check_shape(self) -> "TimeSeries":
        if len(self.time) != len(self.value):
            raise ShapeMismatch("time", len(self.time), "value", len(self.value))
        if any(b <= a for a, b in zip(self.time, self.time[1:])):
            raise ValueError("Los tiempos deben ser estrictamente crecientes")
        return self

    @classmethod
    def regular(cls, values, dt: float, start: float = 0.0) -> "TimeSeries":
        """Crea una serie con paso de tiempo fijo."""
        if dt <= 0:
            raise ValueError("Paso de tiempo debe ser > 0")
        values = [float(v) for v in values]
        time = [round(start + i * dt, 6) for i in range(len(values))]
        return cls(time=time, value=values)

    def __len__(self) -> int:
        return len(self.value)

    def values_array(self) -> np.ndarray:
        """Copia de los valores como array float64."""
        return np.array(self.value, dtype=float)


# ============================================================================
# Modelos de Cuenca
# ============================================================================

class BasinParameters(BaseModel):
    """Parámetros geométricos y de suelo de la cuenca."""
    model_config = ConfigDict(frozen=True)

    length: float = Field(..., gt=0, description="Longitud (pies en si, m en métrico)")
    slope: float = Field(..., gt=0, description="Pendiente (m/m)")
    curve_number: Optional[float] = Field(None, gt=0, le=100, description="Número de curva SCS")
    manning_n: Optional[float] = Field(None, gt=0, description="Coeficiente de Manning")
    unit_system: UnitSystem = Field(default=UnitSystem.METRIC, description="Sistema de unidades")

    @field_validator("unit_system", mode="before")
    @classmethod
    def validate_units(cls, v):
        return parse_unit_system(v)


class LandUseProfile(BaseModel):
    """Fracciones de área por clase de uso de suelo."""
    model_config = ConfigDict(extra="forbid")

    agriculture: float = Field(default=0.0, ge=0, le=1)
    bare_rock: float = Field(default=0.0, ge=0, le=1)
    grassland: float = Field(default=0.0, ge=0, le=1)
    forest: float = Field(default=0.0, ge=0, le=1)
    moorland: float = Field(default=0.0, ge=0, le=1)

    @model_validator(mode="after")
    def check_total(self) -> "LandUseProfile":
        if sum(self.fractions()) > 1.0 + 1e-9:
            raise ValueError("La suma de fracciones de uso de suelo no puede superar 1")
        return self

    def fractions(self) -> list[float]:
        """Fracciones en el orden de LAND_USE_CLASSES."""
        return [getattr(self, name) for name in LAND_USE_CLASSES]


# ============================================================================
# Modelos de Resultados
# ============================================================================

class TimeParameters(BaseModel):
    """Resultado de parámetros temporales de la cuenca."""
    method: TCMethod
    unit_system: UnitSystem
    tc_hr: float = Field(..., description="Tiempo de concentración (hr)")
    tp_hr: float = Field(..., description="Tiempo al pico, 0.7×Tc (hr)")
    lag_hr: float = Field(..., description="Tiempo de retardo, 0.6×Tc (hr)")
    max_retention: Optional[float] = Field(None, description="Retención máxima S (solo SCS)")


class DimensionlessCurve(BaseModel):
    """Hidrograma unitario adimensional (t/tp, q/qp)."""
    ratio_t: list[float]
    ratio_q: list[float]
    peak_rate_factor: int
    shape_m: float

    @model_validator(mode="after")
    def check_curve(self) -> "DimensionlessCurve":
        if len(self.ratio_t) != len(self.ratio_q):
            raise ShapeMismatch("ratio_t", len(self.ratio_t), "ratio_q", len(self.ratio_q))
        if any(b <= a for a, b in zip(self.ratio_t, self.ratio_t[1:])):
            raise ValueError("t/tp debe ser estrictamente creciente")
        return self


class UnitHydrograph(BaseModel):
    """Hidrograma unitario dimensional (por unidad de escorrentía)."""
    time_hr: list[float]
    flow: list[float] = Field(..., description="Caudal (cfs/pulgada o m³/s/mm)")
    tp_hr: float
    qp: float
    dt_hr: float
    unit_system: UnitSystem

    @model_validator(mode="after")
    def check_ordinates(self) -> "UnitHydrograph":
        if len(self.time_hr) != len(self.flow):
            raise ShapeMismatch("time_hr", len(self.time_hr), "flow", len(self.flow))
        if any(q < 0 for q in self.flow):
            raise ValueError("El caudal del hidrograma unitario no puede ser negativo")
        return self


class FloodHydrograph(BaseModel):
    """Hidrograma de crecida compuesto."""
    time_hr: list[float]
    flow: list[float]
    excess: list[float] = Field(..., description="Escorrentía incremental por intervalo")
    cumulative_rainfall: list[float]
    cumulative_runoff: list[float]
    peak_flow: float
    time_to_peak_hr: float
    volume: float = Field(..., description="Integral trapezoidal (caudal × hr)")
    unit_system: UnitSystem


class BucketModelResult(BaseModel):
    """Resultado del modelo de balde por clase de uso de suelo."""
    runoff: list[float] = Field(..., description="Escorrentía total ponderada por área")
    moisture: list[list[float]]
    overflow: list[list[float]]
    interflow: list[list[float]]
    baseflow_hourly: float


class GroundwaterResult(BaseModel):
    """Solución de flujo subterráneo 1D estacionario."""
    x: list[float]
    head: list[float]
    flux: list[float]
    dx: float
