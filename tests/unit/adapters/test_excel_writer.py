"""
Tests para ExcelWriter.

El .xlsx es un ZIP con XML adentro; se revisa su contenido con zipfile para
no depender de un lector de Excel.
"""

import zipfile

import pytest

from clabe_validator.adapters.output.writers.excel_writer import ExcelWriter
from clabe_validator.domain.exceptions import OutputError
from clabe_validator.domain.models.validacion_lote import ValidacionLote
from clabe_validator.domain.services.validator import validate


def _lote(nombre="clabes.txt", clabes=("002010077777777771", "002010077777777779", "12345")):
    clabes = list(clabes)
    return ValidacionLote(
        archivo_origen=nombre,
        clabes=clabes,
        resultados=[validate(c) for c in clabes],
    )


def _contenido_xml(ruta) -> str:
    with zipfile.ZipFile(ruta) as xlsx:
        return "".join(
            xlsx.read(nombre).decode("utf-8")
            for nombre in xlsx.namelist()
            if nombre.endswith(".xml")
        )


class TestExcelWriter:
    """Pruebas para ExcelWriter."""

    def test_write_single_crea_archivo(self, tmp_path):
        salida = ExcelWriter().write_single(_lote(), tmp_path / "reporte.xlsx")

        assert salida == tmp_path / "reporte.xlsx"
        assert salida.exists()
        assert zipfile.is_zipfile(salida)

    def test_agrega_extension(self, tmp_path):
        salida = ExcelWriter().write_single(_lote(), tmp_path / "reporte")
        assert salida.suffix == ".xlsx"
        assert salida.exists()

    def test_crea_directorio_de_salida(self, tmp_path):
        salida = ExcelWriter().write_single(_lote(), tmp_path / "a" / "b" / "reporte.xlsx")
        assert salida.exists()

    def test_hojas_y_contenido(self, tmp_path):
        salida = ExcelWriter().write_single(_lote(), tmp_path / "reporte.xlsx")
        xml = _contenido_xml(salida)

        assert 'name="Resumen"' in xml
        assert 'name="Validaciones"' in xml
        assert "002010077777777771" in xml
        assert "BANAMEX" in xml
        assert "invalid-checksum" in xml
        assert "invalid-length" in xml

    def test_write_consolidated(self, tmp_path):
        lotes = [_lote("a.txt"), _lote("b.csv", ["032180000118359719"])]
        salida = ExcelWriter().write_consolidated(lotes, tmp_path / "consolidado.xlsx")
        xml = _contenido_xml(salida)

        assert "a.txt" in xml
        assert "b.csv" in xml
        assert "032180000118359719" in xml

    def test_consolidated_sin_lotes_lanza_error(self, tmp_path):
        with pytest.raises(OutputError, match="No hay resultados"):
            ExcelWriter().write_consolidated([], tmp_path / "consolidado.xlsx")

    def test_ruta_no_escribible_lanza_output_error(self, tmp_path):
        bloqueo = tmp_path / "archivo.txt"
        bloqueo.write_text("no soy un directorio")

        with pytest.raises(OutputError):
            ExcelWriter().write_single(_lote(), bloqueo / "reporte.xlsx")
