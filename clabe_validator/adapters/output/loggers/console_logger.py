"""
Adaptador de salida: Logger a consola.

Implementación simple de ProcessLogger que imprime eventos a stdout con un
formato consistente y un resumen final.

Útil para:
- Ejecución manual desde terminal.
- Desarrollo y debugging.
"""

from collections import Counter
from pathlib import Path

from clabe_validator.domain.models.resultado_validacion import ResultadoValidacion
from clabe_validator.domain.ports.process_logger import ProcessLogger


class ConsoleLogger(ProcessLogger):
    """Logger que imprime eventos de validación a consola."""

    def __init__(self, verbose: bool = False) -> None:
        """
        Args:
            verbose: Si True, imprime también cada CLABE válida. Las
                     inválidas se imprimen siempre.
        """
        self._verbose = verbose
        self._archivos_recibidos: int = 0
        self._archivos_descartados: int = 0
        self._clabes_validas: int = 0
        self._invalidas_por_tipo: Counter[str] = Counter()
        self._errores: list[dict] = []

    # --- Archivos ---

    def log_file_received(self, file_path: Path, reader_name: str) -> None:
        self._archivos_recibidos += 1
        print(f"  📄 Recibido: {file_path.name} ({reader_name})")

    def log_file_skipped(self, file_path: Path, reason: str) -> None:
        self._archivos_descartados += 1
        print(f"  ⏭️  Descartado: {file_path.name} — {reason}")

    # --- CLABEs ---

    def log_clabe_valid(self, file_path: Path, resultado: ResultadoValidacion) -> None:
        self._clabes_validas += 1
        if self._verbose:
            print(
                f"  ✅ {resultado.codigo_banco}{resultado.codigo_ciudad}"
                f"{resultado.cuenta}{resultado.checksum} — {resultado.tag}, {resultado.ciudad}"
            )

    def log_clabe_invalid(
        self, file_path: Path, clabe: str, resultado: ResultadoValidacion
    ) -> None:
        self._invalidas_por_tipo[resultado.error_kind.value] += 1
        print(f"  ❌ {clabe!r} en {file_path.name} — {resultado.message}")

    def log_error(self, file_path: Path, error: Exception) -> None:
        self._errores.append({"archivo": str(file_path.name), "error": str(error)})
        print(f"  ❌ Error: {file_path.name} — {error}")

    # --- Reporte ---

    def log_report_written(self, output_path: Path, num_clabes: int) -> None:
        print(f"  📁 Reporte generado: {output_path} ({num_clabes} CLABEs)")

    # --- Resumen ---

    def get_summary(self) -> dict:
        return {
            "archivos_recibidos": self._archivos_recibidos,
            "archivos_descartados": self._archivos_descartados,
            "clabes_validas": self._clabes_validas,
            "clabes_invalidas": sum(self._invalidas_por_tipo.values()),
            "invalidas_por_tipo": dict(self._invalidas_por_tipo),
            "errores": self._errores,
        }

    def print_summary(self) -> None:
        """Imprime el resumen final del procesamiento."""
        resumen = self.get_summary()
        print("\n" + "=" * 60)
        print("RESUMEN DE VALIDACIÓN")
        print("=" * 60)
        print(f"  Archivos recibidos:   {resumen['archivos_recibidos']}")
        print(f"  Archivos descartados: {resumen['archivos_descartados']}")
        print(f"  CLABEs válidas:       {resumen['clabes_validas']}")
        print(f"  CLABEs inválidas:     {resumen['clabes_invalidas']}")

        for tipo, cantidad in sorted(resumen["invalidas_por_tipo"].items()):
            print(f"    - {tipo}: {cantidad}")

        if self._errores:
            print("\n  ERRORES:")
            for err in self._errores:
                print(f"    - {err['archivo']}: {err['error']}")

        print("=" * 60)
