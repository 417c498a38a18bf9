"""
Modelo de dominio: Resultado de validar una CLABE.

Este es el objeto central que fluye por toda la arquitectura:
- Lo PRODUCE validate() (servicio de dominio).
- Lo ACUMULA el BatchValidator al procesar un archivo.
- Lo CONSUME el ExcelWriter (adaptador de salida).
- Lo REGISTRA el ProcessLogger.

Se crea uno nuevo en cada llamada y no comparte estado con los catálogos:
los nombres de banco y plaza se copian como strings.
"""

from dataclasses import dataclass
from enum import Enum


class TipoError(str, Enum):
    """Motivo por el que una CLABE es inválida.

    El orden de declaración es el orden de prioridad: si una CLABE tiene
    varios defectos, se reporta el primero de esta lista.
    """

    LENGTH = "length"
    CHARACTERS = "characters"
    CHECKSUM = "checksum"
    BANK = "bank"
    CITY = "city"

    @property
    def es_de_formato(self) -> bool:
        """True si el error invalida la forma de la CLABE (no sólo un catálogo)."""
        return self in (TipoError.LENGTH, TipoError.CHARACTERS, TipoError.CHECKSUM)


@dataclass(frozen=True)
class ResultadoValidacion:
    """Resultado completo de validar una CLABE."""

    ok: bool
    """True si la CLABE pasó todas las reglas."""

    error_kind: TipoError | None
    """Primera regla que falló. None si ok=True."""

    format_ok: bool
    """True si la CLABE está bien formada: longitud, dígitos y checksum
    correctos, aunque el banco o la plaza no estén en el catálogo."""

    message: str
    """Mensaje legible. 'Valid' si ok=True."""

    cuenta: str
    """Dígitos 7 a 17 (número de cuenta). Puede venir incompleto si la
    cadena es más corta de lo esperado."""

    codigo_banco: str
    """Primeros 3 caracteres, tal cual vienen en la entrada."""

    codigo_ciudad: str
    """Caracteres 4 a 6, tal cual vienen en la entrada."""

    checksum: int | None
    """Dígito verificador recalculado a partir de los primeros 17 dígitos.
    None si la entrada no tiene 17 o 18 dígitos."""

    tag: str | None = None
    """Nombre corto del banco, si el código existe en el catálogo."""

    banco: str | None = None
    """Razón social del banco, si el código existe en el catálogo."""

    ciudad: str | None = None
    """Nombre(s) de la plaza separados por coma, si el código existe."""

    @property
    def error(self) -> str | None:
        """Identificador del error con el prefijo 'invalid-'.

        Ejemplos:
            'invalid-length', 'invalid-checksum', None
        """
        if self.error_kind is None:
            return None
        return f"invalid-{self.error_kind.value}"

    def to_dict(self) -> dict:
        """Representación como diccionario con las llaves en inglés.

        Conserva la forma que usan los consumidores existentes del
        validador de CLABE:
        {ok, error, formatOk, message, tag, bank, city, account,
         code: {bank, city}, checksum}
        """
        return {
            "ok": self.ok,
            "error": self.error,
            "formatOk": self.format_ok,
            "message": self.message,
            "tag": self.tag,
            "bank": self.banco,
            "city": self.ciudad,
            "account": self.cuenta,
            "code": {"bank": self.codigo_banco, "city": self.codigo_ciudad},
            "checksum": self.checksum,
        }

    def __post_init__(self) -> None:
        if self.ok and self.error_kind is not None:
            raise ValueError(
                f"Un resultado válido no puede tener error: {self.error_kind.value}"
            )
        if not self.ok and self.error_kind is None:
            raise ValueError("Un resultado inválido debe indicar el tipo de error")
