"""
Modelos de dominio del proyecto clabe-validator.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from clabe_validator.domain.models import Banco, Ciudad, ResultadoValidacion
"""

from clabe_validator.domain.models.banco import Banco
from clabe_validator.domain.models.ciudad import Ciudad
from clabe_validator.domain.models.resultado_validacion import (
    ResultadoValidacion,
    TipoError,
)
from clabe_validator.domain.models.validacion_lote import ValidacionLote

__all__ = [
    "Banco",
    "Ciudad",
    "ResultadoValidacion",
    "TipoError",
    "ValidacionLote",
]
