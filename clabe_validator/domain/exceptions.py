"""
Excepciones de dominio del proyecto clabe-validator.

Una CLABE mal formada NO es una excepción: validate() siempre devuelve un
ResultadoValidacion con ok=False y el tipo de error. Las excepciones de este
módulo se reservan para el mal uso de la API (argumentos del tipo
equivocado) y para fallas de entrada/salida en la validación por lotes.

Jerarquía:
    ClabeBaseError
    ├── TipoArgumentoInvalidoError  → validate() recibió algo que no es str
    ├── CampoInvalidoError          → calculate() recibió un campo no numérico
    ├── FormatoInvalidoError        → El archivo de lote no tiene formato soportado
    ├── LecturaError                → Error al leer un archivo de lote
    └── OutputError                 → Error al generar el reporte de salida
"""


class ClabeBaseError(Exception):
    """Excepción base del proyecto. Todas las demás heredan de esta."""


class TipoArgumentoInvalidoError(ClabeBaseError, TypeError):
    """Se lanza cuando validate() recibe un argumento que no es str.

    Indica un error del programador que llama, no una CLABE inválida.
    Hereda también de TypeError para que `except TypeError` la capture.
    """

    def __init__(self, funcion: str, recibido: object):
        self.funcion = funcion
        self.tipo_recibido = type(recibido).__name__
        super().__init__(
            f"{funcion}: se esperaba str, se recibió {self.tipo_recibido}"
        )


class CampoInvalidoError(ClabeBaseError, ValueError):
    """Se lanza cuando calculate() recibe un campo vacío o no numérico.

    Ejemplos:
    - calculate("", 10, 123)
    - calculate(2, "1O", 123)   (letra O en vez de cero)
    - calculate(2, 10, -5)
    """

    def __init__(self, campo: str, valor: object, detalle: str = ""):
        self.campo = campo
        self.valor = valor
        mensaje = f"Campo '{campo}' inválido: {valor!r}"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class FormatoInvalidoError(ClabeBaseError):
    """Se lanza cuando un archivo de lote no tiene el formato esperado.

    Ejemplos:
    - Se esperaba un .csv pero el archivo es un .pdf.
    - El CSV no tiene columnas.
    """

    def __init__(self, archivo: str, formato_esperado: str, detalle: str = ""):
        self.archivo = archivo
        self.formato_esperado = formato_esperado
        mensaje = f"Formato inválido en '{archivo}'. Se esperaba: {formato_esperado}"
        if detalle:
            mensaje += f" — {detalle}"
        super().__init__(mensaje)


class LecturaError(ClabeBaseError):
    """Se lanza cuando falla la lectura de un archivo de CLABEs.

    Esto puede pasar porque:
    - El archivo no existe o no hay permisos de lectura.
    - El archivo no está en UTF-8.
    - pandas no puede interpretar el CSV.
    """

    def __init__(self, archivo: str, causa: str):
        self.archivo = archivo
        self.causa = causa
        super().__init__(f"Error leyendo '{archivo}': {causa}")


class OutputError(ClabeBaseError):
    """Se lanza cuando falla la generación del reporte de salida.

    Esto puede pasar porque:
    - No hay permisos de escritura en el directorio de salida.
    - El disco está lleno.
    - No hay resultados para escribir.
    """

    def __init__(self, ruta_salida: str, causa: str):
        self.ruta_salida = ruta_salida
        self.causa = causa
        super().__init__(f"Error generando salida en '{ruta_salida}': {causa}")
