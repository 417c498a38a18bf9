"""
Tests para los modelos de dominio.

Verifican que las validaciones, propiedades derivadas e inmutabilidad
funcionan correctamente.
"""

import dataclasses

import pytest

from clabe_validator.domain.models import (
    Banco,
    Ciudad,
    ResultadoValidacion,
    TipoError,
    ValidacionLote,
)


def _resultado(ok=True, error_kind=None, **kwargs):
    datos = dict(
        ok=ok,
        error_kind=error_kind,
        format_ok=True,
        message="Valid",
        cuenta="07777777777",
        codigo_banco="002",
        codigo_ciudad="010",
        checksum=1,
    )
    datos.update(kwargs)
    return ResultadoValidacion(**datos)


class TestBanco:
    """Pruebas para el modelo Banco."""

    def test_crear_banco(self):
        banco = Banco(2, "BANAMEX", "Banco Nacional de México, S.A.")
        assert banco.codigo_texto == "002"

    @pytest.mark.parametrize("codigo", [-1, 1000])
    def test_codigo_fuera_de_rango(self, codigo):
        with pytest.raises(ValueError, match="fuera de rango"):
            Banco(codigo, "X", "X")

    def test_tag_vacio(self):
        with pytest.raises(ValueError, match="tag"):
            Banco(1, "", "Nombre")

    def test_inmutable(self):
        banco = Banco(2, "BANAMEX", "Banco Nacional de México, S.A.")
        with pytest.raises(dataclasses.FrozenInstanceError):
            banco.tag = "OTRO"  # type: ignore[misc]


class TestCiudad:
    """Pruebas para el modelo Ciudad."""

    def test_crear_ciudad(self):
        ciudad = Ciudad(10, "Aguascalientes")
        assert ciudad.codigo == 10
        assert ciudad.nombre == "Aguascalientes"

    def test_codigo_fuera_de_rango(self):
        with pytest.raises(ValueError, match="fuera de rango"):
            Ciudad(1000, "X")

    def test_nombre_vacio(self):
        with pytest.raises(ValueError, match="nombre"):
            Ciudad(10, "")


class TestTipoError:
    """Pruebas para el enum TipoError."""

    def test_orden_de_prioridad(self):
        assert [t.value for t in TipoError] == [
            "length",
            "characters",
            "checksum",
            "bank",
            "city",
        ]

    @pytest.mark.parametrize(
        "tipo, esperado",
        [
            (TipoError.LENGTH, True),
            (TipoError.CHARACTERS, True),
            (TipoError.CHECKSUM, True),
            (TipoError.BANK, False),
            (TipoError.CITY, False),
        ],
    )
    def test_es_de_formato(self, tipo, esperado):
        assert tipo.es_de_formato is esperado

    def test_compara_con_texto(self):
        assert TipoError.CHECKSUM == "checksum"


class TestResultadoValidacion:
    """Pruebas para el modelo ResultadoValidacion."""

    def test_valido_sin_error(self):
        resultado = _resultado()
        assert resultado.error is None

    def test_error_con_prefijo(self):
        resultado = _resultado(ok=False, error_kind=TipoError.CITY, message="Invalid city code: 999")
        assert resultado.error == "invalid-city"

    def test_valido_con_error_lanza_excepcion(self):
        with pytest.raises(ValueError, match="no puede tener error"):
            _resultado(ok=True, error_kind=TipoError.BANK)

    def test_invalido_sin_error_lanza_excepcion(self):
        with pytest.raises(ValueError, match="debe indicar"):
            _resultado(ok=False, error_kind=None)

    def test_inmutable(self):
        resultado = _resultado()
        with pytest.raises(dataclasses.FrozenInstanceError):
            resultado.ok = False  # type: ignore[misc]


class TestValidacionLote:
    """Pruebas para el modelo ValidacionLote."""

    def _lote(self):
        return ValidacionLote(
            archivo_origen="clabes.txt",
            clabes=["002010077777777771", "12345", "002010077777777779", "99"],
            resultados=[
                _resultado(),
                _resultado(ok=False, error_kind=TipoError.LENGTH),
                _resultado(ok=False, error_kind=TipoError.CHECKSUM),
                _resultado(ok=False, error_kind=TipoError.LENGTH),
            ],
        )

    def test_conteos(self):
        lote = self._lote()
        assert len(lote) == 4
        assert lote.num_validas == 1
        assert lote.num_invalidas == 3

    def test_conteo_por_tipo(self):
        assert self._lote().conteo_por_tipo() == {"length": 2, "checksum": 1}

    def test_iteracion_en_pares(self):
        pares = list(self._lote())
        assert pares[0][0] == "002010077777777771"
        assert pares[0][1].ok is True

    def test_listas_de_distinto_largo_lanza_error(self):
        with pytest.raises(ValueError, match="no coincide"):
            ValidacionLote(archivo_origen="x.txt", clabes=["1"], resultados=[])
