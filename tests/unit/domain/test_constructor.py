"""
Tests para clabe_validator.domain.services.constructor

calculate() solo da formato: rellena, recorta y agrega el checksum. No
consulta catálogos.
"""

import pytest

from clabe_validator.domain.exceptions import CampoInvalidoError
from clabe_validator.domain.services.constructor import calculate
from clabe_validator.domain.services.validator import validate


class TestCalculate:
    """Pruebas para calculate."""

    def test_clabe_de_ejemplo(self):
        assert calculate(2, 10, 7777777777) == "002010077777777771"

    def test_acepta_texto_con_ceros(self):
        assert calculate("002", "010", "07777777777") == "002010077777777771"

    def test_acepta_mezcla_de_tipos(self):
        assert calculate(2, "10", "7777777777") == "002010077777777771"

    def test_todo_ceros(self):
        assert calculate(0, 0, 0) == "0" * 18

    def test_siempre_18_digitos(self):
        clabe = calculate(1, 1, 1)
        assert len(clabe) == 18
        assert clabe.isdigit()

    # --- Recorte por la izquierda ---

    def test_recorta_digitos_sobrantes_por_la_izquierda(self):
        """Se conservan los dígitos de la derecha de cada campo."""
        assert calculate(1002, 1010, 107777777777) == "002010077777777771"

    def test_recorta_texto_largo(self):
        assert calculate("9002", "9010", "99907777777777") == "002010077777777771"

    def test_no_consulta_catalogos(self):
        """Banco 000 no existe, pero calculate no lo sabe."""
        clabe = calculate(0, 10, 7777777777)
        assert clabe == "000010077777777773"
        resultado = validate(clabe)
        assert resultado.error_kind.value == "bank"
        assert resultado.format_ok is True

    # --- Ida y vuelta con validate ---

    @pytest.mark.parametrize(
        "banco, plaza, cuenta",
        [
            (2, 10, 7777777777),
            (12, 180, 12345678901),
            (72, 580, 1),
            (646, 320, 99999999999),
            (999, 960, 0),
            (846, 27, "00000000042"),
        ],
    )
    def test_ida_y_vuelta(self, banco, plaza, cuenta):
        resultado = validate(calculate(banco, plaza, cuenta))
        assert resultado.ok is True
        assert int(resultado.codigo_banco) == banco
        assert int(resultado.codigo_ciudad) == plaza
        assert int(resultado.cuenta) == int(cuenta)

    # --- Errores ---

    @pytest.mark.parametrize(
        "banco, plaza, cuenta, campo",
        [
            ("", 10, 1, "bank_code"),
            ("   ", 10, 1, "bank_code"),
            (2, "1O", 1, "city_code"),
            (2, 10, -5, "account_number"),
            (2, 10, "12.5", "account_number"),
            (True, 10, 1, "bank_code"),
            (2, 10, 2.5, "account_number"),
            (2, None, 1, "city_code"),
        ],
    )
    def test_campo_invalido_lanza_error(self, banco, plaza, cuenta, campo):
        with pytest.raises(CampoInvalidoError) as info:
            calculate(banco, plaza, cuenta)
        assert info.value.campo == campo

    def test_error_es_valueerror(self):
        with pytest.raises(ValueError, match="bank_code"):
            calculate("abc", 10, 1)
