"""
Jerarquía de excepciones de hidrocuenca.

Todas heredan de HidroCuencaError, de modo que el llamador puede capturar
cualquier fallo de cálculo con una sola cláusula.
"""


class HidroCuencaError(Exception):
    """Excepción base de hidrocuenca."""
    pass


class InvalidUnitSystem(HidroCuencaError):
    """Sistema de unidades no reconocido."""

    def __init__(self, unit):
        self.unit = unit
        super().__init__(
            f"Sistema de unidades inválido: {unit!r}. Opciones: 'si', 'm'"
        )


class UnsupportedMethod(HidroCuencaError):
    """Método de cálculo o distribución desconocido."""

    def __init__(self, method, available=()):
        self.method = method
        self.available = tuple(available)
        message = f"Método desconocido: {method!r}"
        if self.available:
            message += f". Opciones: {', '.join(map(str, self.available))}"
        super().__init__(message)


class UnsupportedDistribution(HidroCuencaError):
    """Peak Rate Factor fuera del conjunto tabulado."""

    def __init__(self, prf, available=()):
        self.prf = prf
        self.available = tuple(available)
        super().__init__(
            f"PRF no soportado: {prf!r}. "
            f"Use uno de {', '.join(map(str, self.available))}"
        )


class SingularMatrix(HidroCuencaError):
    """Pivote con magnitud menor al umbral durante la eliminación."""

    def __init__(self, row: int, pivot: float):
        self.row = row
        self.pivot = pivot
        super().__init__(f"Matriz singular en fila {row} (pivote={pivot:.3e})")


class ShapeMismatch(HidroCuencaError):
    """Series o arreglos con longitudes inconsistentes."""

    def __init__(self, name_a: str, len_a: int, name_b: str, len_b: int):
        self.lengths = {name_a: len_a, name_b: len_b}
        super().__init__(
            f"Longitudes inconsistentes: {name_a}={len_a}, {name_b}={len_b}"
        )
