"""
CLI de HidroCuenca - Herramienta de Cálculos Hidrológicos.

Este módulo organiza los comandos CLI en sub-aplicaciones temáticas:
- tc: Cálculo de tiempo de concentración
- hydrograph: Hidrogramas adimensional, unitario y de crecida
- bucket: Modelo de balde de humedad del suelo
- groundwater: Flujo subterráneo 1D
"""

from typing import Annotated

import typer

from hidrocuenca.logging_utils import setup_logging

# Crear aplicación principal
app = typer.Typer(
    name="hidrocuenca",
    help="Herramienta de cálculos hidrológicos a escala de cuenca.",
    no_args_is_help=True,
)


def _register_subapps():
    """Registra las sub-aplicaciones."""
    from hidrocuenca.cli.bucket import bucket_app
    from hidrocuenca.cli.groundwater import groundwater_app
    from hidrocuenca.cli.hydrograph import hydrograph_app
    from hidrocuenca.cli.tc import tc_app

    app.add_typer(tc_app, name="tc")
    app.add_typer(hydrograph_app, name="hydrograph")
    app.add_typer(bucket_app, name="bucket")
    app.add_typer(groundwater_app, name="groundwater")


@app.callback()
def main(
    log_level: Annotated[str, typer.Option("--log-level", help="Nivel de logging")] = "WARNING",
):
    """
    HidroCuenca - Cálculos hidrológicos de cuenca.

    Tiempo de concentración, hidrogramas SCS, modelo de balde y
    flujo subterráneo.
    """
    setup_logging(log_level)


_register_subapps()


# Exportar para uso externo
__all__ = [
    "app",
]
