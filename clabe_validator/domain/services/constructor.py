"""
Servicio de dominio: Construcción de una CLABE.

Arma una CLABE de 18 dígitos a partir de sus partes. No consulta los
catálogos: calculate(0, 0, 1) produce una CLABE bien formada aunque el banco
000 no exista. Para saber si el resultado es una CLABE real, pasarlo por
validate().
"""

from clabe_validator.domain.exceptions import CampoInvalidoError
from clabe_validator.domain.shared.checksum import compute_checksum

ANCHO_BANCO = 3
ANCHO_CIUDAD = 3
ANCHO_CUENTA = 11


def calculate(bank_code: int | str, city_code: int | str, account_number: int | str) -> str:
    """Construye una CLABE de 18 dígitos.

    Cada campo se rellena con ceros a la izquierda y, si excede su ancho,
    se conservan sólo los dígitos de la derecha:
    banco → 3, plaza → 3, cuenta → 11. Al final se agrega el checksum.

    Args:
        bank_code: Código de banco, entero o texto de dígitos.
        city_code: Código de plaza, entero o texto de dígitos.
        account_number: Número de cuenta, entero o texto de dígitos.

    Returns:
        CLABE de 18 dígitos.

    Raises:
        CampoInvalidoError: Si algún campo está vacío, es negativo o no es
                            numérico.

    Ejemplos:
        >>> calculate(2, 10, 7777777777)
        '002010077777777771'
        >>> calculate("002", "010", "07777777777")
        '002010077777777771'
        >>> calculate(1002, 10, 7777777777)
        '002010077777777771'
    """
    clabe_17 = (
        _ajustar("bank_code", bank_code, ANCHO_BANCO)
        + _ajustar("city_code", city_code, ANCHO_CIUDAD)
        + _ajustar("account_number", account_number, ANCHO_CUENTA)
    )
    return clabe_17 + str(compute_checksum(clabe_17))


def _ajustar(campo: str, valor: int | str, ancho: int) -> str:
    """Convierte un campo a texto de ancho fijo: rellena y recorta por la izquierda."""
    digitos = _a_digitos(campo, valor)
    return digitos.zfill(ancho)[-ancho:]


def _a_digitos(campo: str, valor: int | str) -> str:
    if isinstance(valor, bool):
        raise CampoInvalidoError(campo, valor, "se esperaba un número, no un booleano")

    if isinstance(valor, int):
        if valor < 0:
            raise CampoInvalidoError(campo, valor, "no puede ser negativo")
        return str(valor)

    if isinstance(valor, str):
        texto = valor.strip()
        if not texto:
            raise CampoInvalidoError(campo, valor, "está vacío")
        if not (texto.isascii() and texto.isdigit()):
            raise CampoInvalidoError(campo, valor, "solo se permiten dígitos 0-9")
        return texto

    raise CampoInvalidoError(
        campo, valor, f"se esperaba int o str, se recibió {type(valor).__name__}"
    )
