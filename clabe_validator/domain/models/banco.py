"""
Modelo de dominio: Banco del catálogo de participantes CLABE.

Los primeros 3 dígitos de una CLABE identifican a la institución.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Banco:
    """Institución registrada en el catálogo de bancos."""

    codigo: int
    """Código numérico de 0 a 999. En la CLABE aparece con ceros a la
    izquierda: el código 2 se escribe '002'."""

    tag: str
    """Nombre corto. Ejemplo: 'BANAMEX', 'BBVA BANCOMER'."""

    nombre: str
    """Razón social completa. Ejemplo: 'Banco Nacional de México, S.A.'."""

    @property
    def codigo_texto(self) -> str:
        """Código con ancho fijo de 3 dígitos, como aparece en la CLABE."""
        return f"{self.codigo:03d}"

    def __post_init__(self) -> None:
        if not 0 <= self.codigo <= 999:
            raise ValueError(f"Código de banco fuera de rango: {self.codigo}. Debe ser 0-999.")
        if not self.tag:
            raise ValueError("El tag del banco no puede estar vacío")
