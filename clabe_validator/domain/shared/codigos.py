"""
Conversión de códigos de catálogo (banco, plaza) a entero.

En una CLABE los códigos vienen como texto de 3 dígitos con ceros a la
izquierda ('002'); los catálogos se indexan por entero (2).
"""


def parse_code(code: int | str) -> int | None:
    """Convierte un código de catálogo a entero.

    Devuelve None si el código no es un entero ni un texto formado sólo por
    dígitos ASCII. No lanza excepciones: un código ilegible simplemente no
    existe en ningún catálogo.

    Ejemplos:
        >>> parse_code("002")
        2
        >>> parse_code(180)
        180
        >>> parse_code("0A1") is None
        True
    """
    if isinstance(code, bool):
        return None
    if isinstance(code, int):
        return code
    if isinstance(code, str) and code.isascii() and code.isdigit():
        return int(code)
    return None
