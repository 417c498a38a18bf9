"""
Modelo de dominio: Plaza (ciudad) del catálogo CLABE.

Los dígitos 4 a 6 de una CLABE identifican la plaza donde se abrió la
cuenta. Un mismo código puede corresponder a varias poblaciones (plazas
fusionadas o nombres alternos), por eso el catálogo guarda registros
individuales y la vista agregada se arma al consultar.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ciudad:
    """Registro individual del catálogo de plazas."""

    codigo: int
    """Código de plaza de 0 a 999."""

    nombre: str
    """Nombre de la población. Ejemplo: 'Aguascalientes', 'Tijuana [alternate]'."""

    def __post_init__(self) -> None:
        if not 0 <= self.codigo <= 999:
            raise ValueError(f"Código de plaza fuera de rango: {self.codigo}. Debe ser 0-999.")
        if not self.nombre:
            raise ValueError("El nombre de la plaza no puede estar vacío")
