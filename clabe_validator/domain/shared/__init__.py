"""
Utilidades compartidas del dominio.

El motor de checksum y los catálogos de referencia (bancos y plazas). No
dependen de ninguna librería externa; solo operan sobre tipos nativos de
Python.

Uso:
    from clabe_validator.domain.shared.checksum import compute_checksum
    from clabe_validator.domain.shared.bancos import get_bank, list_banks
    from clabe_validator.domain.shared.ciudades import get_city_name, list_cities
"""
