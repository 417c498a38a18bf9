"""
Modelo de dominio: Resultado de validar un archivo de CLABEs.

Lo PRODUCE el BatchValidator y lo CONSUME el ReportWriter.
"""

from collections import Counter
from dataclasses import dataclass

from clabe_validator.domain.models.resultado_validacion import ResultadoValidacion


@dataclass(frozen=True)
class ValidacionLote:
    """CLABEs de un archivo con su resultado de validación."""

    archivo_origen: str
    """Nombre del archivo leído. Se guarda para trazabilidad en el reporte."""

    clabes: list[str]
    """Candidatos tal como se validaron (ya sin separadores)."""

    resultados: list[ResultadoValidacion]
    """Resultado de cada candidato, en el mismo orden que clabes."""

    @property
    def num_validas(self) -> int:
        return sum(1 for r in self.resultados if r.ok)

    @property
    def num_invalidas(self) -> int:
        return len(self.resultados) - self.num_validas

    def conteo_por_tipo(self) -> dict[str, int]:
        """Cantidad de CLABEs inválidas por tipo de error.

        Ejemplo:
            {'checksum': 3, 'length': 1}
        """
        conteo = Counter(r.error_kind.value for r in self.resultados if r.error_kind is not None)
        return dict(conteo)

    def __iter__(self):
        return iter(zip(self.clabes, self.resultados))

    def __len__(self) -> int:
        return len(self.clabes)

    def __post_init__(self) -> None:
        if len(self.clabes) != len(self.resultados):
            raise ValueError(
                f"Cantidad de CLABEs ({len(self.clabes)}) y resultados "
                f"({len(self.resultados)}) no coincide"
            )
