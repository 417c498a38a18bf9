"""
Adaptador de salida: Escritor de Excel.

Genera archivos Excel con el layout estándar de 2 hojas:
- Hoja 1 (Resumen): por archivo, total de CLABEs, válidas, inválidas y
  conteo por tipo de error.
- Hoja 2 (Validaciones): una fila por CLABE con el resultado decodificado.
"""

from pathlib import Path

import pandas as pd

from clabe_validator.domain.exceptions import OutputError
from clabe_validator.domain.models.resultado_validacion import TipoError
from clabe_validator.domain.models.validacion_lote import ValidacionLote
from clabe_validator.domain.ports.report_writer import ReportWriter


class ExcelWriter(ReportWriter):
    """Genera reportes de validación en Excel con formato estandarizado."""

    def write_single(self, lote: ValidacionLote, output_path: Path) -> Path:
        """Escribe el reporte de un solo archivo de CLABEs.

        Args:
            lote: CLABEs y resultados de un archivo.
            output_path: Ruta donde crear el archivo. Si no termina en .xlsx,
                        se le agrega la extensión.

        Returns:
            Ruta del archivo creado.
        """
        return self._write([lote], output_path)

    def write_consolidated(self, lotes: list[ValidacionLote], output_path: Path) -> Path:
        """Escribe un solo reporte con las CLABEs de varios archivos."""
        if not lotes:
            raise OutputError(str(output_path), "No hay resultados para consolidar")
        return self._write(lotes, output_path)

    def _write(self, lotes: list[ValidacionLote], output_path: Path) -> Path:
        if output_path.suffix.lower() != ".xlsx":
            output_path = output_path.with_suffix(".xlsx")

        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            self._escribir_excel(lotes, output_path)
        except OutputError:
            raise
        except Exception as e:
            raise OutputError(str(output_path), str(e))

        return output_path

    # =================================================================
    # MÉTODO PRIVADO: Generación del Excel
    # =================================================================

    def _escribir_excel(self, lotes: list[ValidacionLote], output_path: Path) -> None:
        """Genera el archivo Excel con las 2 hojas."""
        # --- Construir datos de Validaciones ---
        filas_validaciones = []
        for lote in lotes:
            for clabe, resultado in lote:
                filas_validaciones.append(
                    {
                        "Archivo": lote.archivo_origen,
                        "CLABE": clabe,
                        "Válida": "SI" if resultado.ok else "NO",
                        "Error": resultado.error or "",
                        "Mensaje": resultado.message,
                        "Formato OK": "SI" if resultado.format_ok else "NO",
                        "Código Banco": resultado.codigo_banco,
                        "Tag": resultado.tag or "",
                        "Banco": resultado.banco or "",
                        "Código Plaza": resultado.codigo_ciudad,
                        "Plaza": resultado.ciudad or "",
                        "Cuenta": resultado.cuenta,
                        "Checksum": "" if resultado.checksum is None else resultado.checksum,
                    }
                )

        df_validaciones = pd.DataFrame(filas_validaciones, columns=_COLUMNAS_VALIDACIONES)

        # --- Construir datos de Resumen ---
        filas_resumen = []
        for lote in lotes:
            conteo = lote.conteo_por_tipo()
            fila = {
                "Archivo": lote.archivo_origen,
                "Total": len(lote),
                "Válidas": lote.num_validas,
                "Inválidas": lote.num_invalidas,
            }
            for tipo in TipoError:
                fila[f"Error {tipo.value}"] = conteo.get(tipo.value, 0)
            filas_resumen.append(fila)

        df_resumen = pd.DataFrame(filas_resumen)

        # --- Escribir Excel con xlsxwriter ---
        with pd.ExcelWriter(output_path, engine="xlsxwriter") as writer:
            df_resumen.to_excel(writer, index=False, sheet_name="Resumen")
            df_validaciones.to_excel(writer, index=False, sheet_name="Validaciones")

            workbook = writer.book
            ws_resumen = writer.sheets["Resumen"]
            ws_validaciones = writer.sheets["Validaciones"]

            # Formato texto: mantener ceros iniciales en CLABE, códigos y cuenta
            text_format = workbook.add_format({"num_format": "@"})

            # --- Formato Hoja Resumen ---
            ws_resumen.set_column("A:A", 30)  # Archivo
            ws_resumen.set_column("B:D", 10)  # Total/Válidas/Inválidas
            ws_resumen.set_column("E:I", 16)  # Conteos por tipo

            # --- Formato Hoja Validaciones ---
            ws_validaciones.set_column("A:A", 30)  # Archivo
            ws_validaciones.set_column("B:B", 22, text_format)  # CLABE
            ws_validaciones.set_column("C:C", 8)  # Válida
            ws_validaciones.set_column("D:D", 18)  # Error
            ws_validaciones.set_column("E:E", 45)  # Mensaje
            ws_validaciones.set_column("F:F", 11)  # Formato OK
            ws_validaciones.set_column("G:G", 13, text_format)  # Código Banco
            ws_validaciones.set_column("H:H", 18)  # Tag
            ws_validaciones.set_column("I:I", 45)  # Banco
            ws_validaciones.set_column("J:J", 13, text_format)  # Código Plaza
            ws_validaciones.set_column("K:K", 35)  # Plaza
            ws_validaciones.set_column("L:L", 14, text_format)  # Cuenta
            ws_validaciones.set_column("M:M", 10)  # Checksum


_COLUMNAS_VALIDACIONES = [
    "Archivo",
    "CLABE",
    "Válida",
    "Error",
    "Mensaje",
    "Formato OK",
    "Código Banco",
    "Tag",
    "Banco",
    "Código Plaza",
    "Plaza",
    "Cuenta",
    "Checksum",
]
