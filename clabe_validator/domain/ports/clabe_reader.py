"""
Puerto de entrada: Lector de CLABEs.

Define el contrato para leer candidatos a CLABE desde un archivo de lote.
Cada tipo de archivo tiene su propio adaptador que implementa este puerto:

    ClabeReader (interfaz)
    ├── TextoPlanoReader   → .txt, una CLABE por línea
    └── CsvReader          → .csv, columna 'clabe' (pandas)
"""

from abc import ABC, abstractmethod
from pathlib import Path


class ClabeReader(ABC):
    """Interfaz para leer CLABEs de un archivo."""

    @abstractmethod
    def can_handle(self, file_path: Path) -> bool:
        """Determina si este lector puede manejar el archivo dado.

        El BatchValidator itera por todos los lectores registrados y usa
        el primero cuyo can_handle devuelva True.

        Args:
            file_path: Ruta al archivo a evaluar.

        Returns:
            True si este lector puede procesar el archivo.
        """
        ...

    @abstractmethod
    def read(self, file_path: Path) -> list[str]:
        """Lee los candidatos a CLABE del archivo, en orden de aparición.

        Los candidatos se devuelven sin separadores (espacios, guiones)
        pero NO se validan: una fila con letras se devuelve tal cual para
        que validate() la reporte.

        Raises:
            FormatoInvalidoError: Si el archivo no tiene el formato esperado.
            LecturaError: Si falla la lectura (no existe, codificación, etc.)
        """
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre legible del lector. Para la bitácora.

        Ejemplo: 'texto-plano', 'csv-pandas'
        """
        ...
