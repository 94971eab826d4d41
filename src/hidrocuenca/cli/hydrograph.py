"""
Comandos CLI para generación de hidrogramas.
"""

from typing import Annotated, Optional

import typer

from hidrocuenca.config import TimeSeries, UnitSystem
from hidrocuenca.core import (
    dimensionless_unit_hydrograph,
    flood_hydrograph,
    resample_unit_hydrograph,
    scale_unit_hydrograph,
)
from hidrocuenca.cli.theme import format_number, print_field, print_header, print_separator
from hidrocuenca.cli.validators import (
    handle_errors,
    parse_series,
    validate_positive,
    validate_units,
)

# Crear sub-aplicación
hydrograph_app = typer.Typer(help="Generación de hidrogramas")

FLOW_UNIT = {UnitSystem.SI: "cfs", UnitSystem.METRIC: "m3/s"}
AREA_UNIT = {UnitSystem.SI: "mi2", UnitSystem.METRIC: "km2"}


def _echo_series(time: list[float], values: list[float]) -> None:
    for t, value in zip(time, values):
        typer.echo(f"{t:>10.3f} {value:>12.3f}")


@hydrograph_app.command("dimensionless")
def hydrograph_dimensionless(
    step: Annotated[float, typer.Option("--step", help="Incremento t/Tp")] = 0.1,
    duration: Annotated[float, typer.Option("--duration", "-d", help="Duración en múltiplos de Tp")] = 5.0,
    prf: Annotated[int, typer.Option("--prf", help="Peak Rate Factor")] = 484,
):
    """
    Genera el hidrograma unitario adimensional Gamma.

    Ejemplo:
        hidrocuenca hydrograph dimensionless --prf 484 --step 0.1
    """
    with handle_errors():
        curve = dimensionless_unit_hydrograph(step, duration, prf)

    typer.echo(f"PRF = {curve.peak_rate_factor} (m = {curve.shape_m})")
    typer.echo(f"{'t/Tp':>10} {'q/qp':>12}")
    _echo_series(curve.ratio_t, curve.ratio_q)


@hydrograph_app.command("unit")
def hydrograph_unit(
    area: Annotated[float, typer.Argument(help="Área de drenaje (mi2 en si, km2 en métrico)")],
    tc: Annotated[float, typer.Argument(help="Tiempo de concentración en horas")],
    prf: Annotated[int, typer.Option("--prf", help="Peak Rate Factor")] = 484,
    units: Annotated[str, typer.Option("--units", "-u", help="Sistema: si, m")] = "m",
    step: Annotated[float, typer.Option("--step", help="Incremento t/Tp")] = 0.1,
    duration: Annotated[float, typer.Option("--duration", "-d", help="Duración en múltiplos de Tp")] = 5.0,
):
    """
    Genera hidrograma unitario escalado para una cuenca.

    Ejemplo:
        hidrocuenca hydrograph unit 25 1.5 --prf 484
    """
    unit_system = validate_units(units)
    validate_positive(area, "El área")
    validate_positive(tc, "Tc")

    with handle_errors():
        curve = dimensionless_unit_hydrograph(step, duration, prf)
        uh = scale_unit_hydrograph(curve, area, tc, unit_system)

    print_header("HIDROGRAMA UNITARIO", f"PRF {prf}")
    print_field("Área", f"{area:g}", AREA_UNIT[unit_system])
    print_field("Tp", format_number(uh.tp_hr), "hr")
    print_field("qp", format_number(uh.qp), FLOW_UNIT[unit_system])
    print_separator()
    _echo_series(uh.time_hr, uh.flow)


@hydrograph_app.command("flood")
def hydrograph_flood(
    rain: Annotated[str, typer.Option("--rain", "-r", help="Lluvia incremental separada por comas")],
    area: Annotated[float, typer.Option("--area", "-a", help="Área de drenaje (mi2 en si, km2 en métrico)")],
    tc: Annotated[float, typer.Option("--tc", help="Tiempo de concentración en horas")],
    cn: Annotated[float, typer.Option("--cn", help="Número de curva")],
    dt: Annotated[float, typer.Option("--dt", help="Intervalo de la lluvia en horas")] = 0.25,
    storm_duration: Annotated[Optional[float], typer.Option("--storm-duration", "-d", help="Duración de tormenta (hr), por defecto toda la serie")] = None,
    prf: Annotated[int, typer.Option("--prf", help="Peak Rate Factor")] = 484,
    units: Annotated[str, typer.Option("--units", "-u", help="Sistema: si, m")] = "m",
):
    """
    Genera hidrograma de crecida por convolución SCS.

    Integra: HU adimensional -> HU escalado -> exceso SCS-CN -> convolución

    Ejemplo:
        hidrocuenca hydrograph flood -r "2,5,12,8,3" -a 10 --tc 1.2 --cn 80 --dt 0.25
    """
    unit_system = validate_units(units)
    validate_positive(area, "El área")
    validate_positive(tc, "Tc")
    validate_positive(dt, "El intervalo")
    values = parse_series(rain, "serie de lluvia")
    if storm_duration is None:
        storm_duration = len(values) * dt

    with handle_errors():
        curve = dimensionless_unit_hydrograph(peak_rate_factor=prf)
        uh = resample_unit_hydrograph(scale_unit_hydrograph(curve, area, tc, unit_system), dt)
        result = flood_hydrograph(
            TimeSeries.regular(values, dt), uh, cn, storm_duration, dt, unit_system
        )

    flow_unit = FLOW_UNIT[unit_system]
    print_header("HIDROGRAMA DE CRECIDA", f"CN {cn:g}, PRF {prf}")
    print_field("Escorrentía total", format_number(sum(result.excess)), "mm" if unit_system == UnitSystem.METRIC else "pulg")
    print_field("Caudal pico", format_number(result.peak_flow), flow_unit)
    print_field("Tiempo al pico", format_number(result.time_to_peak_hr, 2), "hr")
    print_separator()
    _echo_series(result.time_hr, result.flow)
