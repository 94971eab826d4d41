"""
Paleta y funciones de impresión para la consola.

Toda la salida estilizada de la CLI pasa por una única consola Rich.
"""

from dataclasses import dataclass

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.text import Text


@dataclass
class ColorPalette:
    """Paleta de colores de la CLI."""
    primary: str = "bold cyan"
    muted: str = "dim"
    label: str = "white"
    number: str = "cyan"
    unit: str = "dim cyan"
    border: str = "blue"
    warning: str = "yellow"
    error: str = "red"


_palette = ColorPalette()
_console: Console | None = None


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return _palette


def get_console() -> Console:
    """Obtiene la consola Rich (se crea en el primer uso)."""
    global _console
    if _console is None:
        _console = Console(highlight=False)
    return _console


def format_number(value: float, decimals: int = 3) -> str:
    """Formatea un número con precisión especificada."""
    if abs(value) >= 1000:
        return f"{value:,.{decimals}f}"
    return f"{value:.{decimals}f}"


def print_header(text: str, subtitle: str = None) -> None:
    """Imprime un encabezado."""
    p = get_palette()
    content = Text(text, style=p.primary)
    if subtitle:
        content.append(f"\n{subtitle}", style=p.muted)
    get_console().print(Panel(content, border_style=p.border, box=box.ROUNDED, padding=(0, 2)))


def print_separator(char: str = "-", width: int = 50) -> None:
    """Imprime un separador."""
    get_console().print(char * width, style=get_palette().border)


def print_field(label: str, value, unit: str = None, indent: int = 2) -> None:
    """Imprime un campo con valor."""
    p = get_palette()
    text = Text(" " * indent)
    text.append(f"{label}: ", style=p.label)
    text.append(str(value), style=p.number)
    if unit:
        text.append(f" {unit}", style=p.unit)
    get_console().print(text)


def print_warning(text: str) -> None:
    """Imprime advertencia."""
    get_console().print(Text(f"[!] {text}", style=get_palette().warning))


def print_error(text: str) -> None:
    """Imprime error."""
    get_console().print(Text(f"[x] {text}", style=get_palette().error))
