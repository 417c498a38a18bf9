"""
Catálogo de bancos participantes en el sistema CLABE.

Los primeros 3 dígitos de una CLABE son el código del banco. El código se
interpreta como entero, así que '002' y el entero 2 se refieren al mismo
banco.

Fuente: https://es.wikipedia.org/wiki/CLABE#C.C3.B3digo_de_banco (9 de enero de 2017).
Los datos se conservan tal cual, incluidos los tags repetidos (STP y
SKANDIA aparecen con dos códigos distintos).
"""

from types import MappingProxyType

from clabe_validator.domain.models.banco import Banco
from clabe_validator.domain.shared.codigos import parse_code

# Código → (tag, razón social).
_BANCOS: dict[int, tuple[str, str]] = {
    2: ("BANAMEX", "Banco Nacional de México, S.A."),
    6: ("BANCOMEXT", "Banco Nacional de Comercio Exterior"),
    9: ("BANOBRAS", "Banco Nacional de Obras y Servicios Públicos"),
    12: ("BBVA BANCOMER", "BBVA Bancomer, S.A."),
    14: ("SANTANDER", "Banco Santander, S.A."),
    19: ("BANJERCITO", "Banco Nacional del Ejército, Fuerza Aérea y Armada"),
    21: ("HSBC", "HSBC México, S.A."),
    22: ("GE MONEY", "GE Money Bank, S.A."),
    30: ("BAJÍO", "Banco del Bajío, S.A."),
    32: ("IXE", "IXE Banco, S.A."),
    36: ("INBURSA", "Banco Inbursa, S.A."),
    37: ("INTERACCIONES", "Banco Interacciones, S.A."),
    42: ("MIFEL", "Banca Mifel, S.A."),
    44: ("SCOTIABANK", "Scotiabank Inverlat, S.A."),
    58: ("BANREGIO", "Banco Regional de Monterrey, S.A."),
    59: ("INVEX", "Banco Invex, S.A."),
    60: ("BANSI", "Bansi, S.A."),
    62: ("AFIRME", "Banca Afirme, S.A."),
    72: ("BANORTE", "Banco Mercantil del Norte, S.A."),
    102: ("ABNAMRO", "ABN AMRO Bank México, S.A."),
    103: ("AMERICAN EXPRESS", "American Express Bank (México), S.A."),
    106: ("BAMSA", "Bank of America México, S.A."),
    108: ("TOKYO", "Bank of Tokyo-Mitsubishi UFJ (México), S.A."),
    110: ("JP MORGAN", "Banco J.P. Morgan, S.A."),
    112: ("BMONEX", "Banco Monex, S.A."),
    113: ("VE POR MAS", "Banco Ve por Mas, S.A."),
    116: ("ING", "ING Bank (México), S.A."),
    124: ("DEUTSCHE", "Deutsche Bank México, S.A."),
    126: ("CREDIT SUISSE", "Banco Credit Suisse (México), S.A."),
    127: ("AZTECA", "Banco Azteca, S.A."),
    128: ("AUTOFIN", "Banco Autofin México, S.A."),
    129: ("BARCLAYS", "Barclays Bank México, S.A."),
    130: ("COMPARTAMOS", "Banco Compartamos, S.A."),
    131: ("FAMSA", "Banco Ahorro Famsa, S.A."),
    132: ("BMULTIVA", "Banco Multiva, S.A."),
    133: ("PRUDENTIAL", "Prudencial Bank, S.A."),
    134: ("WAL-MART", "Banco Wal Mart de México Adelante, S.A."),
    135: ("NAFIN", "Nacional Financiera, S.N.C."),
    136: ("REGIONAL", "Banco Regional, S.A."),
    137: ("BANCOPPEL", "BanCoppel, S.A."),
    138: ("ABC CAPITAL", "ABC Capital, S.A. I.B.M."),
    139: ("UBS BANK", "UBS Banco, S.A."),
    140: ("FÁCIL", "Banco Fácil, S.A."),
    141: ("VOLKSWAGEN", "Volkswagen Bank S.A. Institución de Banca Múltiple"),
    143: ("CIBANCO", "Consultoría Internacional Banco, S.A."),
    145: ("BBASE", "Banco BASE, S.A. de I.B.M."),
    147: ("BANKAOOL", "Bankaool, S.A., Institución de Banca Múltiple"),
    148: ("PAGATODO", "Banco PagaTodo S.A., Institución de Banca Múltiple"),
    150: ("BIM", "Banco Inmobiliario Mexicano, S.A., Institución de Banca Múltiple"),
    152: ("BANCREA", "Banco Bancrea, S.A., Institución de Banca Múltiple"),
    156: ("SABADELL", "Banco Sabadell, S.A. I.B.M."),
    166: ("BANSEFI", "Banco del Ahorro Nacional y Servicios Financieros, S.N.C."),
    168: ("HIPOTECARIA FEDERAL", "Sociedad Hipotecaria Federal, S.N.C."),
    600: ("MONEXCB", "Monex Casa de Bolsa, S.A. de C.V."),
    601: ("GBM", "GBM Grupo Bursátil Mexicano, S.A. de C.V."),
    602: ("MASARI CC.", "Masari Casa de Cambio, S.A. de C.V."),
    604: ("C.B. INBURSA", "Inversora Bursátil, S.A. de C.V."),
    605: ("VALUÉ", "Valué, S.A. de C.V., Casa de Bolsa"),
    606: ("CB BASE", "Base Internacional Casa de Bolsa, S.A. de C.V."),
    607: ("TIBER", "Casa de Cambio Tiber, S.A. de C.V."),
    608: ("VECTOR", "Vector Casa de Bolsa, S.A. de C.V."),
    610: ("B&B", "B y B Casa de Cambio, S.A. de C.V."),
    611: ("INTERCAM", "Intercam Casa de Cambio, S.A. de C.V."),
    613: ("MULTIVA", "Multivalores Casa de Bolsa, S.A. de C.V. Multiva Gpo. Fin."),
    614: ("ACCIVAL", "Acciones y Valores Banamex, S.A. de C.V., Casa de Bolsa"),
    615: ("MERRILL LYNCH", "Merrill Lynch México, S.A. de C.V., Casa de Bolsa"),
    616: ("FINAMEX", "Casa de Bolsa Finamex, S.A. de C.V."),
    617: ("VALMEX", "Valores Mexicanos Casa de Bolsa, S.A. de C.V."),
    618: ("ÚNICA", "Única Casa de Cambio, S.A. de C.V."),
    619: ("ASEGURADORA MAPFRE", "MAPFRE Tepeyac S.A."),
    620: ("AFORE PROFUTURO", "Profuturo G.N.P., S.A. de C.V."),
    621: ("CB ACTINBER", "Actinver Casa de Bolsa, S.A. de C.V."),
    622: ("ACTINVE SI", "Actinver S.A. de C.V."),
    623: ("SKANDIA", "Skandia Vida S.A. de C.V."),
    624: ("CONSULTORÍA", "Consultoría Internacional Casa de Cambio, S.A. de C.V."),
    626: ("CBDEUTSCHE", "Deutsche Securities, S.A. de C.V."),
    627: ("ZURICH", "Zurich Compañía de Seguros, S.A."),
    628: ("ZURICHVI", "Zurich Vida, Compañía de Seguros, S.A."),
    629: ("HIPOTECARIA SU CASITA", "Hipotecaria su Casita, S.A. de C.V."),
    630: ("C.B. INTERCAM", "Intercam Casa de Bolsa, S.A. de C.V."),
    631: ("C.B. VANGUARDIA", "Vanguardia Casa de Bolsa, S.A. de C.V."),
    632: ("BULLTICK C.B.", "Bulltick Casa de Bolsa, S.A. de C.V."),
    633: ("STERLING", "Sterling Casa de Cambio, S.A. de C.V."),
    634: ("FINCOMUN", "Fincomún, Servicios Financieros Comunitarios, S.A. de C.V."),
    636: ("HDI SEGUROS", "HDI Seguros, S.A. de C.V."),
    637: ("ORDER", "OrderExpress Casa de Cambio , S.A. de C.V. AAC"),
    638: ("AKALA", "Akala, S.A. de C.V., Sociedad Financiera Popular"),
    640: ("JP MORGAN C.B.", "J.P. Morgan Casa de Bolsa, S.A. de C.V."),
    642: ("REFORMA", "Operadora de Recursos Reforma, S.A. de C.V."),
    646: ("STP", "Sistema de Transferencias y Pagos STP, S.A. de C.V., SOFOM E.N.R."),
    647: ("TELECOMM", "Telecomunicaciones de México"),
    648: ("EVERCORE", "Evercore Casa de Bolsa, S.A. de C.V."),
    649: ("SKANDIA", "Skandia Operadora S.A. de C.V."),
    651: ("SEGMTY", "Seguros Monterrey New York Life, S.A de C.V."),
    652: ("ASEA", "Solución Asea, S.A. de C.V., Sociedad Financiera Popular"),
    653: ("KUSPIT", "Kuspit Casa de Bolsa, S.A. de C.V."),
    655: ("SOFIEXPRESS", "J.P. SOFIEXPRESS, S.A. de C.V., S.F.P."),
    656: ("UNAGRA", "UNAGRA, S.A. de C.V., S.F.P."),
    659: ("OPCIONES EMPRESARIALES DEL NOROESTE", "Opciones Empresariales Del Noreste, S.A. DE C.V."),
    670: ("LIBERTAD", "Libertad Servicios Financieros, S.A. De C.V."),
    846: ("STP", "Sistema de Transferencias y Pagos STP"),
    901: ("CLS", "CLS Bank International"),
    902: ("INDEVAL", "SD. INDEVAL, S.A. de C.V."),
    999: ("N/A", "N/A"),
}

BANCOS: MappingProxyType[int, Banco] = MappingProxyType(
    {codigo: Banco(codigo, tag, nombre) for codigo, (tag, nombre) in _BANCOS.items()}
)
"""Vista de solo lectura código → Banco."""


def get_bank(code: int | str) -> Banco | None:
    """Busca un banco por código.

    Acepta el código como entero o como texto de dígitos; los ceros a la
    izquierda no importan.

    Ejemplos:
        >>> get_bank(2).tag
        'BANAMEX'
        >>> get_bank("072").tag
        'BANORTE'
        >>> get_bank("000") is None
        True
    """
    codigo = parse_code(code)
    if codigo is None:
        return None
    return BANCOS.get(codigo)


def list_banks() -> list[Banco]:
    """Lista de todos los bancos ordenados por código."""
    return [BANCOS[codigo] for codigo in sorted(BANCOS)]
