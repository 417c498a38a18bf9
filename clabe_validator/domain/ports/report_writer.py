"""
Puerto de salida: Escritor de reportes de validación.

Define el contrato para escribir los resultados de una validación por lotes
en algún formato persistente. Hoy es Excel; el dominio no depende del
formato.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from clabe_validator.domain.models.validacion_lote import ValidacionLote


class ReportWriter(ABC):
    """Interfaz para escribir reportes de validación."""

    @abstractmethod
    def write_single(self, lote: ValidacionLote, output_path: Path) -> Path:
        """Escribe el reporte de un solo archivo de CLABEs.

        Args:
            lote: CLABEs y resultados de un archivo.
            output_path: Ruta donde crear el archivo de salida.

        Returns:
            Ruta real del archivo creado (puede diferir si se añadió extensión).

        Raises:
            OutputError: Si falla la escritura (permisos, disco lleno, etc.)
        """
        ...

    @abstractmethod
    def write_consolidated(self, lotes: list[ValidacionLote], output_path: Path) -> Path:
        """Escribe un reporte con las CLABEs de varios archivos.

        Returns:
            Ruta real del archivo creado.

        Raises:
            OutputError: Si falla la escritura o no hay lotes.
        """
        ...
