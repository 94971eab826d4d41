"""Configuración de logging para hidrocuenca."""

import logging


def setup_logging(level: str = "WARNING") -> None:
    """
    Configura el logger raíz.

    basicConfig no hace nada si el logging ya fue configurado.

    Args:
        level: Nombre del nivel ('DEBUG', 'INFO', ...); inválido = WARNING
    """
    numeric_level = getattr(logging, str(level).upper(), logging.WARNING)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
