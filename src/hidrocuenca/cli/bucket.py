"""
Comandos CLI para el modelo de balde.
"""

from typing import Annotated

import typer

from hidrocuenca.core import bucket_model
from hidrocuenca.cli.theme import format_number, print_field, print_header, print_separator
from hidrocuenca.cli.validators import handle_errors, parse_series

# Crear sub-aplicación
bucket_app = typer.Typer(help="Modelo de balde de humedad del suelo")


@bucket_app.command("run")
def bucket_run(
    rain: Annotated[str, typer.Option("--rain", "-r", help="Precipitación separada por comas")],
    evaporation: Annotated[str, typer.Option("--evap", "-e", help="Evaporación separada por comas")],
    baseflow: Annotated[float, typer.Option("--baseflow", "-b", help="Flujo base diario")] = 0.0,
    infiltration: Annotated[float, typer.Option("--infiltration", "-k", help="Capacidad de infiltración (0-1)")] = 0.5,
    agriculture: Annotated[float, typer.Option("--agriculture", help="Fracción agrícola")] = 0.0,
    bare_rock: Annotated[float, typer.Option("--bare-rock", help="Fracción de roca desnuda")] = 0.0,
    grassland: Annotated[float, typer.Option("--grassland", help="Fracción de pradera")] = 0.0,
    forest: Annotated[float, typer.Option("--forest", help="Fracción de bosque")] = 0.0,
    moorland: Annotated[float, typer.Option("--moorland", help="Fracción de páramo")] = 0.0,
):
    """
    Simula escorrentía con el modelo de balde por uso de suelo.

    Ejemplo:
        hidrocuenca bucket run -r "10,40,5" -e "1,1,1" --grassland 0.6 --forest 0.4
    """
    rain_values = parse_series(rain, "serie de precipitación")
    evap_values = parse_series(evaporation, "serie de evaporación")
    land_use = {
        "agriculture": agriculture,
        "bare_rock": bare_rock,
        "grassland": grassland,
        "forest": forest,
        "moorland": moorland,
    }

    with handle_errors():
        result = bucket_model(rain_values, baseflow, evap_values, land_use, infiltration)

    print_header("MODELO DE BALDE", f"k = {infiltration:g}")
    print_field("Flujo base horario", format_number(result.baseflow_hourly, 4))
    print_field("Escorrentía total", format_number(sum(result.runoff)))
    print_separator()
    typer.echo(f"{'Paso':>6} {'Escorrentía':>14}")
    for i, value in enumerate(result.runoff):
        typer.echo(f"{i:>6} {value:>14.4f}")
