"""
Comandos CLI para cálculo de tiempo de concentración.
"""

from typing import Annotated

import typer

from hidrocuenca.config import TCMethod, TimeParameters, UnitSystem
from hidrocuenca.core import calculate_time_parameters
from hidrocuenca.cli.theme import print_field, print_header, print_separator
from hidrocuenca.cli.validators import (
    handle_errors,
    validate_positive,
    validate_slope,
    validate_units,
)

# Crear sub-aplicación
tc_app = typer.Typer(help="Cálculo de tiempo de concentración")

LENGTH_UNIT = {UnitSystem.SI: "ft", UnitSystem.METRIC: "m"}
DEPTH_UNIT = {UnitSystem.SI: "pulg", UnitSystem.METRIC: "mm"}


def _print_time_parameters(result: TimeParameters, length: float, slope: float) -> None:
    units = result.unit_system
    print_header(f"TIEMPO DE CONCENTRACION - {result.method.value.upper()}")
    print_field("Longitud", f"{length:g}", LENGTH_UNIT[units])
    print_field("Pendiente", f"{slope:.4f} m/m ({slope*100:.2f}%)")
    if result.max_retention is not None:
        print_field("Retención S", f"{result.max_retention:.3f}", DEPTH_UNIT[units])
    print_separator()
    typer.echo(f"Tc = {result.tc_hr:.3f} horas ({result.tc_hr*60:.1f} minutos)")
    typer.echo(f"Tp = {result.tp_hr:.3f} horas")
    typer.echo(f"Tlag = {result.lag_hr:.3f} horas")


@tc_app.command("scs")
def tc_scs(
    length: Annotated[float, typer.Argument(help="Longitud hidráulica (ft en si, m en métrico)")],
    slope: Annotated[float, typer.Argument(help="Pendiente media (m/m)")],
    cn: Annotated[float, typer.Option("--cn", help="Número de curva (0-100)")] = 75.0,
    units: Annotated[str, typer.Option("--units", "-u", help="Sistema: si, m")] = "m",
):
    """
    Calcula Tc usando la ecuación SCS (NRCS lag).

    Ejemplo:
        hidrocuenca tc scs 4000 0.10 --cn 82 --units si
    """
    unit_system = validate_units(units)
    validate_positive(length, "La longitud")
    validate_slope(slope)

    with handle_errors():
        result = calculate_time_parameters(TCMethod.SCS, unit_system, length, slope, curve_number=cn)
    _print_time_parameters(result, length, slope)


@tc_app.command("kirpich")
def tc_kirpich(
    length: Annotated[float, typer.Argument(help="Longitud del cauce (ft en si, m en métrico)")],
    slope: Annotated[float, typer.Argument(help="Pendiente (m/m)")],
    units: Annotated[str, typer.Option("--units", "-u", help="Sistema: si, m")] = "m",
):
    """
    Calcula Tc usando fórmula Kirpich.

    Ejemplo:
        hidrocuenca tc kirpich 1500 0.02
    """
    unit_system = validate_units(units)
    validate_positive(length, "La longitud")
    validate_slope(slope)

    with handle_errors():
        result = calculate_time_parameters(TCMethod.KIRPICH, unit_system, length, slope)
    _print_time_parameters(result, length, slope)


@tc_app.command("kerby")
def tc_kerby(
    length: Annotated[float, typer.Argument(help="Longitud del flujo (ft en si, m en métrico)")],
    slope: Annotated[float, typer.Argument(help="Pendiente (m/m)")],
    manning: Annotated[float, typer.Option("--manning", "-n", help="Coeficiente de retardo")] = 0.4,
    units: Annotated[str, typer.Option("--units", "-u", help="Sistema: si, m")] = "m",
):
    """
    Calcula Tc usando fórmula Kerby.

    Ejemplo:
        hidrocuenca tc kerby 300 0.01 --manning 0.4
    """
    unit_system = validate_units(units)
    validate_positive(length, "La longitud")
    validate_slope(slope)

    with handle_errors():
        result = calculate_time_parameters(
            TCMethod.KERBY, unit_system, length, slope, manning_n=manning
        )
    _print_time_parameters(result, length, slope)
