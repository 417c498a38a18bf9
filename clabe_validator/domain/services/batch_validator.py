"""
Servicio de dominio: Validación de CLABEs por lotes.

Orquesta la validación de un archivo:
1. Recibe una ruta a un archivo (.txt, .csv).
2. Selecciona el ClabeReader adecuado (can_handle).
3. Lee los candidatos.
4. Valida cada uno con validate().
5. Registra cada resultado en la bitácora y devuelve un ValidacionLote.

El CLI solo decide QUÉ archivos procesar y DÓNDE guardar los reportes.
"""

from collections.abc import Sequence
from pathlib import Path

from clabe_validator.domain.exceptions import FormatoInvalidoError, LecturaError
from clabe_validator.domain.models.validacion_lote import ValidacionLote
from clabe_validator.domain.ports.clabe_reader import ClabeReader
from clabe_validator.domain.ports.process_logger import ProcessLogger
from clabe_validator.domain.services.validator import validate


class BatchValidator:
    """Valida todas las CLABEs de un archivo y produce un ValidacionLote.

    Recibe sus dependencias por constructor; solo conoce las interfaces
    (puertos), no los lectores ni el logger concretos.
    """

    def __init__(self, readers: Sequence[ClabeReader], logger: ProcessLogger) -> None:
        """
        Args:
            readers: Lectores disponibles, en orden de prioridad. Se usa el
                     primero cuyo can_handle devuelva True.
            logger: Logger para la bitácora de procesamiento.
        """
        self._readers = readers
        self._logger = logger

    def validate_file(
        self, file_path: Path, archivo_origen: str | None = None
    ) -> ValidacionLote | None:
        """Valida las CLABEs de un archivo.

        Args:
            file_path: Archivo a validar.
            archivo_origen: Nombre con el que se identifica el lote. Por
                            defecto, el nombre del archivo.

        Returns:
            ValidacionLote con un resultado por candidato.
            None si el archivo fue descartado o no se pudo leer.
        """
        reader = self._find_reader(file_path)
        if reader is None:
            self._logger.log_file_skipped(
                file_path, f"Ningún lector puede manejar '{file_path.suffix}'"
            )
            return None

        self._logger.log_file_received(file_path, reader.name)

        try:
            clabes = reader.read(file_path)
        except (LecturaError, FormatoInvalidoError) as e:
            self._logger.log_error(file_path, e)
            return None

        resultados = []
        for clabe in clabes:
            resultado = validate(clabe)
            if resultado.ok:
                self._logger.log_clabe_valid(file_path, resultado)
            else:
                self._logger.log_clabe_invalid(file_path, clabe, resultado)
            resultados.append(resultado)

        return ValidacionLote(
            archivo_origen=archivo_origen or file_path.name,
            clabes=list(clabes),
            resultados=resultados,
        )

    def validate_directory(self, dir_path: Path) -> list[ValidacionLote]:
        """Valida todos los archivos soportados de un directorio (recursivo).

        Returns:
            Lista de ValidacionLote (solo los archivos que se pudieron leer),
            en orden alfabético de ruta. Cada lote se identifica por su ruta
            relativa a dir_path ('sub/clabes.txt').

        Raises:
            ValueError: Si dir_path no es un directorio.
        """
        if not dir_path.is_dir():
            raise ValueError(f"No es un directorio: {dir_path}")

        archivos = sorted(
            p for p in dir_path.glob("**/*") if p.is_file() and self._find_reader(p)
        )

        lotes: list[ValidacionLote] = []
        for archivo in archivos:
            lote = self.validate_file(archivo, archivo.relative_to(dir_path).as_posix())
            if lote is not None:
                lotes.append(lote)

        return lotes

    def _find_reader(self, file_path: Path) -> ClabeReader | None:
        """Encuentra el primer lector que pueda manejar el archivo."""
        for reader in self._readers:
            if reader.can_handle(file_path):
                return reader
        return None
