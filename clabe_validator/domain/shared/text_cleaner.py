"""
Utilidades de limpieza de texto para CLABEs capturadas a mano.

Las CLABEs que llegan en archivos de lote suelen venir con separadores:
'002 010 07777777777 1', '002-010-07777777777-1'. validate() NO limpia su
entrada (un espacio es un carácter inválido), así que los lectores de lote
aplican estas funciones antes de validar.

Estas funciones no saben de bancos ni de checksums. Solo operan sobre strings.
"""

import re

_SEPARADORES = re.compile(r"[\s\-.]+")


def remove_separators(text: str) -> str:
    """Elimina espacios, tabs, guiones y puntos.

    Ejemplos:
        >>> remove_separators("002 010 07777777777 1")
        '002010077777777771'
        >>> remove_separators("002-010-07777777777-1")
        '002010077777777771'
    """
    return _SEPARADORES.sub("", text)


def remove_non_printable(text: str) -> str:
    """Elimina caracteres no imprimibles (BOM, caracteres de control).

    Ejemplos:
        >>> remove_non_printable("\\ufeff002010077777777771")
        '002010077777777771'
    """
    return "".join(char for char in text if char.isprintable() or char in "\n\r\t")


def normalize_line_endings(text: str) -> str:
    """Normaliza todos los saltos de línea a \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def clean_clabe_text(text: str) -> str:
    """Aplica todas las limpiezas a un candidato individual.

    Secuencia:
    1. Eliminar caracteres no imprimibles
    2. Eliminar separadores
    Las letras se conservan para que validate() las reporte.
    """
    return remove_separators(remove_non_printable(text))
