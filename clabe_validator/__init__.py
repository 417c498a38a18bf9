"""
clabe-validator: validación, decodificación y construcción de CLABEs.

Uso:
    >>> import clabe_validator as clabe
    >>> clabe.compute_checksum("00201007777777777")
    1
    >>> clabe.validate("002010077777777771").tag
    'BANAMEX'
    >>> clabe.calculate(2, 10, 7777777777)
    '002010077777777771'
"""

from clabe_validator.domain.exceptions import (
    CampoInvalidoError,
    ClabeBaseError,
    TipoArgumentoInvalidoError,
)
from clabe_validator.domain.models import Banco, Ciudad, ResultadoValidacion, TipoError
from clabe_validator.domain.services.constructor import calculate
from clabe_validator.domain.services.validator import is_valid, validate
from clabe_validator.domain.shared.bancos import get_bank, list_banks
from clabe_validator.domain.shared.checksum import compute_checksum
from clabe_validator.domain.shared.ciudades import cities_map, get_city_name, list_cities

__version__ = "1.3.5"

__all__ = [
    "Banco",
    "CampoInvalidoError",
    "Ciudad",
    "ClabeBaseError",
    "ResultadoValidacion",
    "TipoArgumentoInvalidoError",
    "TipoError",
    "calculate",
    "cities_map",
    "compute_checksum",
    "get_bank",
    "get_city_name",
    "is_valid",
    "list_banks",
    "list_cities",
    "validate",
]
