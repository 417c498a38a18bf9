"""
Adaptador de entrada: Lector de CLABEs en texto plano.

Formato esperado: un archivo .txt en UTF-8 con una CLABE por línea.
- Las líneas vacías (o que solo tienen separadores) se ignoran.
- Las líneas que empiezan con '#' (aun precedidas de BOM) son comentarios.
- Los separadores (espacios, guiones, puntos) se eliminan:
  '002-010-07777777777-1' → '002010077777777771'.
"""

from pathlib import Path

from clabe_validator.domain.exceptions import FormatoInvalidoError, LecturaError
from clabe_validator.domain.ports.clabe_reader import ClabeReader
from clabe_validator.domain.shared.text_cleaner import clean_clabe_text, normalize_line_endings


class TextoPlanoReader(ClabeReader):
    """Lee CLABEs de archivos .txt, una por línea."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    @property
    def name(self) -> str:
        return "texto-plano"

    def can_handle(self, file_path: Path) -> bool:
        return file_path.suffix.lower() == ".txt"

    def read(self, file_path: Path) -> list[str]:
        if not file_path.exists():
            raise FormatoInvalidoError(str(file_path), "TXT", "El archivo no existe")

        try:
            contenido = file_path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise LecturaError(str(file_path), str(e))

        clabes: list[str] = []
        for linea in normalize_line_endings(contenido).split("\n"):
            limpia = clean_clabe_text(linea)
            if not limpia or limpia.startswith("#"):
                continue
            clabes.append(limpia)

        return clabes
