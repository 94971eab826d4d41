"""
Comandos CLI para flujo subterráneo 1D.
"""

from typing import Annotated, Optional

import typer

from hidrocuenca.core import groundwater_1d
from hidrocuenca.cli.theme import print_field, print_header, print_separator
from hidrocuenca.cli.validators import handle_errors, validate_positive

# Crear sub-aplicación
groundwater_app = typer.Typer(help="Flujo subterráneo 1D estacionario")


@groundwater_app.command("solve")
def groundwater_solve(
    length: Annotated[float, typer.Argument(help="Longitud del dominio")],
    k: Annotated[float, typer.Argument(help="Conductividad hidráulica")],
    nodes: Annotated[int, typer.Option("--nodes", "-n", help="Número de nodos")] = 11,
    w0: Annotated[float, typer.Option("--w0", help="Recarga constante")] = 0.0,
    w1: Annotated[float, typer.Option("--w1", help="Recarga lineal")] = 0.0,
    q0: Annotated[float, typer.Option("--q0", help="Flujo en el borde izquierdo")] = 0.0,
    ql: Annotated[float, typer.Option("--ql", help="Flujo en el borde derecho")] = 0.0,
    hl: Annotated[Optional[float], typer.Option("--hl", help="Carga fija en el borde derecho")] = None,
):
    """
    Resuelve cargas hidráulicas por diferencias finitas.

    Ejemplo:
        hidrocuenca groundwater solve 100 5 --nodes 21 --q0 0.5 --hl 10
    """
    validate_positive(length, "La longitud")
    validate_positive(k, "La conductividad")

    with handle_errors():
        result = groundwater_1d(length, k, nodes, w0, w1, q0, ql, hl)

    print_header("FLUJO SUBTERRANEO 1D", f"{nodes} nodos")
    print_field("dx", f"{result.dx:.4f}")
    print_field("Carga máxima", f"{max(result.head):.4f}")
    print_separator()
    typer.echo(f"{'x':>10} {'h':>12} {'q':>12}")
    for x, h, q in zip(result.x, result.head, result.flux):
        typer.echo(f"{x:>10.3f} {h:>12.4f} {q:>12.4f}")
