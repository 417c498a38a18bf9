"""
Puerto de salida: Bitácora de procesamiento (Process Logger).

Define el contrato para registrar eventos durante la validación por lotes.
Los eventos son de negocio ("la CLABE X es inválida por checksum"), no de
infraestructura. La implementación puede imprimir a consola, escribir con
`logging` o acumular en memoria para los tests.

El núcleo (compute_checksum, validate, calculate) no registra nada: solo el
BatchValidator usa este puerto.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from clabe_validator.domain.models.resultado_validacion import ResultadoValidacion


class ProcessLogger(ABC):
    """Interfaz para la bitácora de procesamiento."""

    # --- Archivos ---

    @abstractmethod
    def log_file_received(self, file_path: Path, reader_name: str) -> None:
        """Registra que se recibió un archivo y qué lector lo va a leer."""
        ...

    @abstractmethod
    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        """Registra que un archivo fue descartado.

        Args:
            file_path: Ruta del archivo descartado.
            reason: Razón del descarte. Ejemplo: "Extensión .docx no soportada"
        """
        ...

    # --- CLABEs ---

    @abstractmethod
    def log_clabe_valid(self, file_path: Path, resultado: ResultadoValidacion) -> None:
        """Registra una CLABE válida."""
        ...

    @abstractmethod
    def log_clabe_invalid(
        self, file_path: Path, clabe: str, resultado: ResultadoValidacion
    ) -> None:
        """Registra una CLABE inválida con el motivo.

        Args:
            file_path: Archivo de donde salió la CLABE.
            clabe: Candidato tal como se validó.
            resultado: Resultado con error_kind y message.
        """
        ...

    @abstractmethod
    def log_error(self, file_path: Path, error: Exception) -> None:
        """Registra un error de lectura o escritura."""
        ...

    # --- Reporte ---

    @abstractmethod
    def log_report_written(self, output_path: Path, num_clabes: int) -> None:
        """Registra que se generó el reporte de salida."""
        ...

    # --- Resumen ---

    @abstractmethod
    def get_summary(self) -> dict:
        """Devuelve un resumen de todo el procesamiento.

        Returns:
            Diccionario con métricas:
            {
                'archivos_recibidos': int,
                'archivos_descartados': int,
                'clabes_validas': int,
                'clabes_invalidas': int,
                'invalidas_por_tipo': dict[str, int],
                'errores': list[dict],  # [{archivo, error}]
            }
        """
        ...
