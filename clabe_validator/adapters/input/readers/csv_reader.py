"""
Adaptador de entrada: Lector de CLABEs en CSV usando pandas.

Busca la columna 'clabe' (sin importar mayúsculas). Si no existe, usa la
primera columna; si además la primera fila ya es una CLABE (solo dígitos y
separadores), el archivo no trae encabezado y se vuelve a leer sin él.
Todas las columnas se leen como texto (dtype=str): leídas
como número, pandas perdería los ceros a la izquierda ('002...' → 2...) y
una CLABE de 18 dígitos podría convertirse en float.
"""

from pathlib import Path

import pandas as pd

from clabe_validator.domain.exceptions import FormatoInvalidoError, LecturaError
from clabe_validator.domain.ports.clabe_reader import ClabeReader
from clabe_validator.domain.shared.text_cleaner import clean_clabe_text

COLUMNA_CLABE = "clabe"


class CsvReader(ClabeReader):
    """Lee CLABEs de archivos .csv, con o sin encabezado."""

    def __init__(self, column: str = COLUMNA_CLABE, sep: str = ",") -> None:
        """
        Args:
            column: Nombre de la columna con las CLABEs (case-insensitive).
            sep: Separador de campos.
        """
        self._column = column
        self._sep = sep

    @property
    def name(self) -> str:
        return "csv-pandas"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".csv"

    def read(self, file_path: Path) -> list[str]:
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "CSV", "El archivo no existe")

        df = self._read_csv(file_path, header=0)

        columna = self._find_column(list(df.columns))
        if columna is None:
            raise FormatoInvalidoError(str(file_path), "CSV", "El archivo no tiene columnas")

        # Sin columna 'clabe' y con una CLABE en la primera fila: no hay encabezado
        if str(columna).strip().lower() != self._column.lower() and _parece_clabe(columna):
            df = self._read_csv(file_path, header=None)
            columna = df.columns[0]

        clabes: list[str] = []
        for valor in df[columna]:
            limpio = clean_clabe_text(valor)
            if limpio:
                clabes.append(limpio)

        return clabes

    def _read_csv(self, file_path: Path, header: int | None) -> pd.DataFrame:
        try:
            return pd.read_csv(
                file_path,
                sep=self._sep,
                header=header,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True,
            )
        except pd.errors.EmptyDataError:
            raise FormatoInvalidoError(str(file_path), "CSV", "El archivo no tiene columnas")
        except (OSError, UnicodeDecodeError, pd.errors.ParserError) as e:
            raise LecturaError(str(file_path), str(e))

    def _find_column(self, columnas: list[str]) -> str | None:
        """Devuelve la columna configurada o, en su defecto, la primera."""
        for columna in columnas:
            if str(columna).strip().lower() == self._column.lower():
                return columna
        return columnas[0] if columnas else None


def _parece_clabe(encabezado: object) -> bool:
    """True si el encabezado es en realidad un valor numérico ('002-010-...')."""
    limpio = clean_clabe_text(str(encabezado))
    return limpio.isascii() and limpio.isdigit()
