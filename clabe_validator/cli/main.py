"""
Punto de entrada CLI: clabe-validator.

Uso:
    # Validar una o varias CLABEs
    clabe-validator validate 002010077777777771 002010077777777779

    # Calcular el dígito verificador de 17 dígitos
    clabe-validator checksum 00201007777777777

    # Construir una CLABE a partir de banco, plaza y cuenta
    clabe-validator calculate 2 10 7777777777

    # Consultar catálogos
    clabe-validator banks
    clabe-validator cities

    # Validar un archivo o carpeta (.txt / .csv) y generar reporte Excel
    clabe-validator batch /ruta/clabes.csv -o /ruta/salida

Este módulo es el ÚNICO lugar donde se ensamblan los componentes de la
validación por lotes. No contiene lógica de negocio.
"""

import argparse
import re
import sys
from pathlib import Path

from clabe_validator import __version__
from clabe_validator.adapters.output.loggers.console_logger import ConsoleLogger
from clabe_validator.adapters.output.writers.excel_writer import ExcelWriter
from clabe_validator.domain.exceptions import CampoInvalidoError, OutputError
from clabe_validator.domain.services.batch_validator import BatchValidator
from clabe_validator.domain.services.constructor import calculate
from clabe_validator.domain.services.validator import validate
from clabe_validator.domain.shared.bancos import list_banks
from clabe_validator.domain.shared.checksum import compute_checksum
from clabe_validator.domain.shared.ciudades import cities_map
from clabe_validator.infrastructure.registry import create_default_registry


def main(argv: list[str] | None = None) -> int:
    """Punto de entrada principal del CLI. Devuelve el código de salida."""
    args = _parse_args(argv)
    return args.handler(args)


# =================================================================
# Subcomandos
# =================================================================


def _cmd_validate(args: argparse.Namespace) -> int:
    todas_validas = True
    for clabe in args.clabes:
        resultado = validate(clabe)
        if resultado.ok:
            print(f"✅ {clabe} — {resultado.tag} ({resultado.banco}), {resultado.ciudad}")
        else:
            todas_validas = False
            print(f"❌ {clabe} — {resultado.message}")
    return 0 if todas_validas else 1


def _cmd_checksum(args: argparse.Namespace) -> int:
    checksum = compute_checksum(args.digits)
    if checksum is None:
        print(f"❌ Se esperaban 17 o 18 dígitos, se recibió: {args.digits!r}")
        return 1
    print(checksum)
    return 0


def _cmd_calculate(args: argparse.Namespace) -> int:
    try:
        clabe = calculate(args.bank_code, args.city_code, args.account_number)
    except CampoInvalidoError as e:
        print(f"❌ {e}")
        return 1
    print(clabe)
    return 0


def _cmd_banks(args: argparse.Namespace) -> int:
    for banco in list_banks():
        print(f"{banco.codigo_texto}  {banco.tag:<24} {banco.nombre}")
    return 0


def _cmd_cities(args: argparse.Namespace) -> int:
    mapa = cities_map()
    for codigo in sorted(mapa):
        print(f"{codigo:03d}  {mapa[codigo]}")
    return 0


def _cmd_batch(args: argparse.Namespace) -> int:
    input_path = Path(args.input_path)
    output_dir = Path(args.output_dir) if args.output_dir else None

    # --- Ensamblar componentes ---
    logger = ConsoleLogger(verbose=args.verbose)
    registry = create_default_registry()
    excel_writer = ExcelWriter()
    batch = BatchValidator(readers=registry.readers, logger=logger)

    if output_dir is None:
        output_dir = input_path.parent if input_path.is_file() else input_path

    print("=" * 60)
    print("CLABE VALIDATOR")
    print("=" * 60)
    print(f"  Entrada:  {input_path}")
    print(f"  Salida:   {output_dir}")
    print(f"  Formatos: {', '.join(registry.available_readers)}")
    print()

    if input_path.is_file():
        lote = batch.validate_file(input_path)
        lotes = [lote] if lote is not None else []
    elif input_path.is_dir():
        lotes = batch.validate_directory(input_path)
    else:
        print(f"❌ La ruta no existe: {input_path}")
        return 1

    if not lotes:
        print("\n❌ No se procesó ningún archivo.")
        return 1

    try:
        usados: set[str] = set()
        for lote in lotes:
            output_file = output_dir / _nombre_reporte(lote.archivo_origen, usados)
            logger.log_report_written(excel_writer.write_single(lote, output_file), len(lote))

        if len(lotes) > 1:
            consolidado = excel_writer.write_consolidated(lotes, output_dir / "consolidado.xlsx")
            logger.log_report_written(consolidado, sum(len(lote) for lote in lotes))
    except OutputError as e:
        logger.log_error(Path(e.ruta_salida), e)
        logger.print_summary()
        return 1

    logger.print_summary()
    return 0 if logger.get_summary()["clabes_invalidas"] == 0 else 1


def _nombre_reporte(archivo_origen: str, usados: set[str]) -> str:
    """Nombre del Excel de un lote: 'sub/clabes.txt' → 'validacion_sub_clabes_txt.xlsx'.

    Si el nombre ya se usó en esta corrida se le agrega un contador.
    """
    base = "validacion_" + re.sub(r"[^\w-]+", "_", archivo_origen).strip("_")
    nombre = f"{base}.xlsx"
    contador = 2
    while nombre in usados:
        nombre = f"{base}_{contador}.xlsx"
        contador += 1
    usados.add(nombre)
    return nombre


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parsea los argumentos de línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="clabe-validator",
        description="Validación y construcción de CLABEs (Clave Bancaria Estandarizada)",
        epilog="Ejemplo: clabe-validator validate 002010077777777771",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    p_validate = subparsers.add_parser("validate", help="Valida una o varias CLABEs")
    p_validate.add_argument("clabes", nargs="+", help="CLABEs de 18 dígitos")
    p_validate.set_defaults(handler=_cmd_validate)

    p_checksum = subparsers.add_parser(
        "checksum", help="Calcula el dígito verificador de 17 (o 18) dígitos"
    )
    p_checksum.add_argument("digits", help="Primeros 17 dígitos de la CLABE")
    p_checksum.set_defaults(handler=_cmd_checksum)

    p_calculate = subparsers.add_parser(
        "calculate", help="Construye una CLABE a partir de banco, plaza y cuenta"
    )
    p_calculate.add_argument("bank_code", help="Código de banco (ej: 2 o 002)")
    p_calculate.add_argument("city_code", help="Código de plaza (ej: 10 o 010)")
    p_calculate.add_argument("account_number", help="Número de cuenta (hasta 11 dígitos)")
    p_calculate.set_defaults(handler=_cmd_calculate)

    p_banks = subparsers.add_parser("banks", help="Lista el catálogo de bancos")
    p_banks.set_defaults(handler=_cmd_banks)

    p_cities = subparsers.add_parser("cities", help="Lista el catálogo de plazas")
    p_cities.set_defaults(handler=_cmd_cities)

    p_batch = subparsers.add_parser(
        "batch", help="Valida un archivo o carpeta (.txt, .csv) y genera reporte Excel"
    )
    p_batch.add_argument("input_path", help="Ruta a un archivo o a un directorio")
    p_batch.add_argument(
        "-o",
        "--output-dir",
        dest="output_dir",
        help="Directorio de salida para los Excel generados. "
        "Si no se especifica, se usa el mismo directorio de la entrada.",
    )
    p_batch.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Imprime también las CLABEs válidas",
    )
    p_batch.set_defaults(handler=_cmd_batch)

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
