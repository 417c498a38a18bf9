"""
Registro de lectores de CLABEs disponibles.

Agregar un formato de entrada nuevo requiere solo 2 pasos:
1. Crear la clase XxxReader que implemente ClabeReader.
2. Registrarla aquí con register() o agregarla a create_default_registry().
"""

from clabe_validator.domain.ports.clabe_reader import ClabeReader


class ReaderRegistry:
    """Registro ordenado de lectores de CLABEs."""

    def __init__(self) -> None:
        self._readers: dict[str, ClabeReader] = {}

    def register(self, reader: ClabeReader) -> None:
        """Registra un lector. La clave es reader.name.

        Raises:
            ValueError: Si ya existe un lector con ese nombre.
        """
        if reader.name in self._readers:
            raise ValueError(
                f"Ya existe un lector registrado como '{reader.name}': "
                f"{type(self._readers[reader.name]).__name__}. "
                f"No se puede registrar {type(reader).__name__}."
            )
        self._readers[reader.name] = reader

    def get(self, name: str) -> ClabeReader | None:
        return self._readers.get(name)

    @property
    def readers(self) -> list[ClabeReader]:
        """Lectores en orden de registro (orden de prioridad)."""
        return list(self._readers.values())

    @property
    def available_readers(self) -> list[str]:
        return list(self._readers.keys())

    def __len__(self) -> int:
        return len(self._readers)


def create_default_registry() -> ReaderRegistry:
    """Crea un registro con todos los lectores disponibles.

    Returns:
        ReaderRegistry con texto plano y CSV.
    """
    registry = ReaderRegistry()

    from clabe_validator.adapters.input.readers.texto_plano_reader import TextoPlanoReader

    registry.register(TextoPlanoReader())

    from clabe_validator.adapters.input.readers.csv_reader import CsvReader

    registry.register(CsvReader())

    return registry
