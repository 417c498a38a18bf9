"""
Puertos (interfaces) del dominio.

Los puertos definen QUÉ necesita la validación por lotes, sin decir CÓMO se
implementa. Cada puerto tiene uno o más adaptadores que lo implementan.

Uso:
    from clabe_validator.domain.ports import ClabeReader, ProcessLogger, ReportWriter
"""

from clabe_validator.domain.ports.clabe_reader import ClabeReader
from clabe_validator.domain.ports.process_logger import ProcessLogger
from clabe_validator.domain.ports.report_writer import ReportWriter

__all__ = [
    "ClabeReader",
    "ProcessLogger",
    "ReportWriter",
]
