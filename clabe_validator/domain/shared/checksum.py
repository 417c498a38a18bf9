"""
Dígito verificador de la CLABE.

El dígito 18 se calcula a partir de los 17 anteriores:

1. Cada dígito se multiplica por su peso. Los pesos se repiten en el ciclo
   3, 7, 1 (posición 0 → 3, posición 1 → 7, posición 2 → 1, posición 3 → 3, ...).
2. Cada producto se reduce módulo 10 ANTES de sumarlo.
3. Se suman los 17 valores reducidos.
4. El dígito verificador es (10 - suma % 10) % 10.

Reducir sólo la suma total da el mismo resultado final para estos pesos.
"""

import re

PESOS: tuple[int, int, int] = (3, 7, 1)
"""Ciclo de pesos aplicado posición por posición."""

_PATRON_17_18 = re.compile(r"[0-9]{17,18}")


def compute_checksum(clabe_17: str) -> int | None:
    """Calcula el dígito verificador a partir de los primeros 17 dígitos.

    Acepta la CLABE sin dígito verificador (17 dígitos) o completa (18
    dígitos; el último se ignora).

    Args:
        clabe_17: Texto de 17 o 18 dígitos ASCII.

    Returns:
        Entero de 0 a 9.
        None si la entrada no es texto de exactamente 17 o 18 dígitos.
        No lanza excepciones.

    Ejemplos:
        >>> compute_checksum("00201007777777777")
        1
        >>> compute_checksum("002010077777777771")
        1
        >>> compute_checksum("0020100777") is None
        True
    """
    if not isinstance(clabe_17, str) or not _PATRON_17_18.fullmatch(clabe_17):
        return None

    suma = 0
    for i, caracter in enumerate(clabe_17[:17]):
        suma += (int(caracter) * PESOS[i % 3]) % 10

    return (10 - suma % 10) % 10
