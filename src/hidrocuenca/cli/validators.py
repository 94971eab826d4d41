"""
Validadores centralizados para entradas CLI.

Proporciona funciones de validación con mensajes de error consistentes.
"""

from contextlib import contextmanager

import typer

from hidrocuenca.cli.theme import print_error, print_warning
from hidrocuenca.config import UnitSystem, parse_unit_system
from hidrocuenca.exceptions import HidroCuencaError


def parse_series(text: str, name: str = "serie") -> list[float]:
    """
    Convierte una lista separada por comas en valores numéricos.

    Ejemplo: "0.5, 1.2,3" -> [0.5, 1.2, 3.0]
    """
    try:
        values = [float(v) for v in text.replace(";", ",").split(",") if v.strip()]
    except ValueError:
        print_error(f"La {name} debe ser una lista de números separados por comas")
        raise typer.Exit(1)
    if not values:
        print_error(f"La {name} está vacía")
        raise typer.Exit(1)
    return values


def validate_units(value: str) -> UnitSystem:
    """Valida el sistema de unidades ('si' o 'm')."""
    try:
        return parse_unit_system(value)
    except HidroCuencaError as e:
        print_error(str(e))
        raise typer.Exit(1)


def validate_positive(value: float, name: str, exit_on_error: bool = True) -> bool:
    """
    Valida que un valor sea positivo.

    Args:
        value: Valor a validar
        name: Nombre del parámetro para el mensaje
        exit_on_error: Si True, termina el programa con error

    Returns:
        True si es válido, False si no
    """
    if value <= 0:
        print_error(f"{name} debe ser positivo (recibido: {value})")
        if exit_on_error:
            raise typer.Exit(1)
        return False
    return True


def validate_slope(value: float, exit_on_error: bool = True) -> bool:
    """Valida que la pendiente (m/m) sea positiva y razonable."""
    if not validate_positive(value, "La pendiente", exit_on_error):
        return False
    if value > 1:
        print_warning(f"Pendiente={value} parece estar en %. Use m/m.")
    return True


@contextmanager
def handle_errors():
    """Convierte errores de cálculo en mensaje y código de salida 1."""
    try:
        yield
    except (HidroCuencaError, ValueError) as e:
        print_error(str(e))
        raise typer.Exit(1)
