"""
Tests para los catálogos de referencia: bancos y plazas.

Los datos deben coincidir literalmente con los que usan los consumidores
existentes, incluidos los códigos de plaza repetidos y los nombres
'[alternate]'.
"""

import threading
from types import MappingProxyType

import pytest

from clabe_validator.domain.shared import ciudades
from clabe_validator.domain.shared.bancos import BANCOS, get_bank, list_banks
from clabe_validator.domain.shared.ciudades import (
    cities_map,
    get_city_name,
    list_cities,
)
from clabe_validator.domain.shared.codigos import parse_code


class TestParseCode:
    """Pruebas para parse_code."""

    @pytest.mark.parametrize(
        "code, expected",
        [(2, 2), ("002", 2), ("2", 2), ("180", 180), (0, 0), ("000", 0)],
    )
    def test_codigos_validos(self, code, expected):
        assert parse_code(code) == expected

    @pytest.mark.parametrize("code", ["", "0A1", "1 0", "-1", "١٢", None, 2.0, True])
    def test_codigos_ilegibles_devuelven_none(self, code):
        assert parse_code(code) is None


class TestBancos:
    """Pruebas para el catálogo de bancos."""

    def test_cantidad_de_bancos(self):
        assert len(BANCOS) == 104
        assert len(list_banks()) == 104

    def test_banamex(self):
        banco = get_bank(2)
        assert banco.tag == "BANAMEX"
        assert banco.nombre == "Banco Nacional de México, S.A."
        assert banco.codigo_texto == "002"

    def test_busqueda_por_texto_ignora_ceros(self):
        assert get_bank("072") is get_bank(72)
        assert get_bank("072").tag == "BANORTE"

    @pytest.mark.parametrize(
        "codigo, tag",
        [
            (12, "BBVA BANCOMER"),
            (30, "BAJÍO"),
            (610, "B&B"),
            (646, "STP"),
            (846, "STP"),
            (623, "SKANDIA"),
            (649, "SKANDIA"),
            (999, "N/A"),
        ],
    )
    def test_tags(self, codigo, tag):
        assert get_bank(codigo).tag == tag

    def test_nombre_con_acentos_y_espacios(self):
        assert get_bank(637).nombre == "OrderExpress Casa de Cambio , S.A. de C.V. AAC"
        assert get_bank(659).tag == "OPCIONES EMPRESARIALES DEL NOROESTE"

    @pytest.mark.parametrize("codigo", [0, "000", 1, 500, 1000, "abc"])
    def test_banco_inexistente(self, codigo):
        assert get_bank(codigo) is None

    def test_lista_ordenada_por_codigo(self):
        codigos = [b.codigo for b in list_banks()]
        assert codigos == sorted(codigos)
        assert codigos[0] == 2
        assert codigos[-1] == 999

    def test_catalogo_de_solo_lectura(self):
        with pytest.raises(TypeError):
            BANCOS[1] = BANCOS[2]  # type: ignore[index]


class TestCiudades:
    """Pruebas para el catálogo de plazas y su vista agregada."""

    def test_cantidad_de_registros(self):
        assert len(list_cities()) == 466

    def test_registros_en_orden_del_catalogo(self):
        registros = list_cities()
        assert (registros[0].codigo, registros[0].nombre) == (10, "Aguascalientes")
        assert (registros[-1].codigo, registros[-1].nombre) == (960, "Calera de V. Rosales")

    def test_plaza_simple(self):
        assert get_city_name(10) == "Aguascalientes"
        assert get_city_name("010") == "Aguascalientes"

    def test_codigo_con_dos_nombres(self):
        assert get_city_name(27) == "Tecate, Tijuana"

    def test_alias_alternate_se_conserva(self):
        """Tijuana aparece en 27 y, como alterno, en 28."""
        assert get_city_name(28) == "La Mesa, Rosarito, Tijuana [alternate]"
        assert get_city_name(320).endswith("Tonala [alternate], Zapopan")

    def test_nombre_con_coma_no_se_separa(self):
        assert get_city_name(542) == "Cuautla, Oaxtepec, Morelos"

    def test_nombres_n_a(self):
        """Los códigos marcados 'N/A' existen en el catálogo."""
        for codigo in (198, 382, 651, 693):
            assert get_city_name(codigo) == "N/A"

    def test_zona_metropolitana(self):
        nombres = get_city_name(180).split(", ")
        assert len(nombres) == 17
        assert nombres[0] == "Atizapan"
        assert "Ciudad de México" in nombres
        assert nombres[-1] == "Tlalnepantla"

    @pytest.mark.parametrize("codigo", [0, 11, 999, "9x9", ""])
    def test_plaza_inexistente(self, codigo):
        assert get_city_name(codigo) is None

    def test_no_se_eliminan_duplicados(self):
        """Cada registro aporta su nombre: la suma de nombres = registros."""
        total = sum(len(nombre.split(", ")) for nombre in cities_map().values())
        # 'Oaxtepec, Morelos' es un solo registro con coma en el nombre
        assert total == len(list_cities()) + 1

    def test_mapa_de_solo_lectura(self):
        mapa = cities_map()
        assert isinstance(mapa, MappingProxyType)
        with pytest.raises(TypeError):
            mapa[999] = "Nueva"  # type: ignore[index]


class TestMapaCiudadesUnaSolaVez:
    """La vista agregada se construye una sola vez por proceso."""

    def test_misma_instancia_en_cada_llamada(self):
        assert cities_map() is cities_map()

    def test_se_construye_una_vez_con_hilos_concurrentes(self, monkeypatch):
        llamadas = []
        original = ciudades._build_cities_map
        barrera = threading.Barrier(8)

        def build_contando():
            llamadas.append(1)
            return original()

        monkeypatch.setattr(ciudades, "_mapa_ciudades", None)
        monkeypatch.setattr(ciudades, "_build_cities_map", build_contando)

        resultados = []

        def consultar():
            barrera.wait()
            resultados.append(ciudades.cities_map())

        hilos = [threading.Thread(target=consultar) for _ in range(8)]
        for hilo in hilos:
            hilo.start()
        for hilo in hilos:
            hilo.join()

        assert len(llamadas) == 1
        assert len(resultados) == 8
        assert all(r is resultados[0] for r in resultados)
