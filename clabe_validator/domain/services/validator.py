"""
Servicio de dominio: Validación de una CLABE.

Clasifica una cadena candidata con una cadena de reglas en orden estricto.
La primera regla que falla determina el error reportado:

1. length      → la cadena no tiene exactamente 18 caracteres.
2. characters  → hay caracteres que no son dígitos 0-9.
3. checksum    → el dígito 18 no coincide con el calculado.
4. bank        → el código de banco no está en el catálogo.
5. city        → el código de plaza no está en el catálogo.

Si ninguna falla, la CLABE es válida. Una cadena corta con letras se
reporta como 'length', nunca como 'characters'.

Las fallas de validación nunca se lanzan como excepción; la única
excepción es TipoArgumentoInvalidoError cuando el argumento no es str.
"""

import re

from clabe_validator.domain.exceptions import TipoArgumentoInvalidoError
from clabe_validator.domain.models.resultado_validacion import (
    ResultadoValidacion,
    TipoError,
)
from clabe_validator.domain.shared.bancos import get_bank
from clabe_validator.domain.shared.checksum import compute_checksum
from clabe_validator.domain.shared.ciudades import get_city_name

LONGITUD_CLABE = 18

_NO_DIGITO = re.compile(r"[^0-9]")

_MENSAJES: dict[TipoError, str] = {
    TipoError.LENGTH: "Must be exactly 18 digits long",
    TipoError.CHARACTERS: "Must be only numeric digits (no letters)",
    TipoError.CHECKSUM: "Invalid checksum, last digit should be: ",
    TipoError.BANK: "Invalid bank code: ",
    TipoError.CITY: "Invalid city code: ",
}

MENSAJE_VALIDA = "Valid"


def validate(clabe: str) -> ResultadoValidacion:
    """Valida una CLABE y devuelve la información decodificada.

    Args:
        clabe: Cadena candidata. No se limpia: espacios o guiones cuentan
               como caracteres inválidos.

    Returns:
        ResultadoValidacion. Siempre incluye los códigos crudos de banco y
        plaza, la cuenta y el checksum recalculado (None si la cadena no
        tiene 17-18 dígitos). El tag, banco y ciudad se llenan sólo si el
        código correspondiente existe en el catálogo.

    Raises:
        TipoArgumentoInvalidoError: Si clabe no es str.

    Ejemplos:
        >>> validate("002010077777777771").ok
        True
        >>> validate("002010077777777779").message
        'Invalid checksum, last digit should be: 1'
    """
    if not isinstance(clabe, str):
        raise TipoArgumentoInvalidoError("validate(clabe)", clabe)

    codigo_banco = clabe[0:3]
    codigo_ciudad = clabe[3:6]
    cuenta = clabe[6:17]
    checksum_real = compute_checksum(clabe)

    banco = get_bank(codigo_banco)
    ciudad = get_city_name(codigo_ciudad)

    error_kind, dato = _clasificar(clabe, checksum_real, banco is not None, ciudad is not None)

    if error_kind is None:
        mensaje = MENSAJE_VALIDA
    else:
        mensaje = _MENSAJES[error_kind] + dato

    return ResultadoValidacion(
        ok=error_kind is None,
        error_kind=error_kind,
        format_ok=error_kind is None or not error_kind.es_de_formato,
        message=mensaje,
        cuenta=cuenta,
        codigo_banco=codigo_banco,
        codigo_ciudad=codigo_ciudad,
        checksum=checksum_real,
        tag=banco.tag if banco else None,
        banco=banco.nombre if banco else None,
        ciudad=ciudad,
    )


def is_valid(clabe: str) -> bool:
    """Atajo: True si la CLABE pasa todas las reglas."""
    return validate(clabe).ok


def _clasificar(
    clabe: str,
    checksum_real: int | None,
    banco_existe: bool,
    ciudad_existe: bool,
) -> tuple[TipoError | None, str]:
    """Aplica las reglas en orden y devuelve (primer error, dato del mensaje).

    El dato es el dígito esperado para 'checksum' y el código ofensivo para
    'bank' y 'city'; vacío en los demás casos.
    """
    if len(clabe) != LONGITUD_CLABE:
        return TipoError.LENGTH, ""

    if _NO_DIGITO.search(clabe):
        return TipoError.CHARACTERS, ""

    if int(clabe[17]) != checksum_real:
        return TipoError.CHECKSUM, str(checksum_real)

    if not banco_existe:
        return TipoError.BANK, clabe[0:3]

    if not ciudad_existe:
        return TipoError.CITY, clabe[3:6]

    return None, ""
