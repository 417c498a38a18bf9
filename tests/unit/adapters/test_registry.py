"""
Tests para el registro de lectores.
"""

import pytest

from clabe_validator.adapters.input.readers.texto_plano_reader import TextoPlanoReader
from clabe_validator.infrastructure.registry import ReaderRegistry, create_default_registry


class TestReaderRegistry:
    def test_registro_por_defecto(self):
        registry = create_default_registry()
        assert len(registry) == 2
        assert registry.available_readers == ["texto-plano", "csv-pandas"]
        assert isinstance(registry.get("texto-plano"), TextoPlanoReader)

    def test_lector_inexistente(self):
        assert create_default_registry().get("pdf") is None

    def test_registro_duplicado_lanza_error(self):
        registry = ReaderRegistry()
        registry.register(TextoPlanoReader())
        with pytest.raises(ValueError, match="Ya existe"):
            registry.register(TextoPlanoReader())

    def test_readers_en_orden_de_registro(self):
        registry = create_default_registry()
        assert [r.name for r in registry.readers] == ["texto-plano", "csv-pandas"]
