"""
kmul CLI — ввод двух чисел и вывод их произведения

Операнды берутся из аргументов командной строки; отсутствующие
запрашиваются интерактивно ("Enter first number: ", "Enter second number: ").

Вывод по умолчанию:
    <x> x <y> =
     <product>

С флагом --request операнды читаются из документа multiplication_request
(файл или "-" для stdin). С флагом --json печатается документ контракта
multiplication_result.
"""

import argparse
import json
import logging
import sys
from typing import Any, Optional, Sequence

import jsonschema

from kmul.core.contracts import validate_multiplication_result
from kmul.core.domain import (
    KaratsubaConfig,
    MultiplicationRequest,
    apply_int_str_limit,
    compute_product,
)
from kmul.core.math import BackendUnavailableError, IntegerBackend

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kmul",
        description="Multiply two non-negative integers with the Karatsuba algorithm",
    )
    parser.add_argument("x", nargs="?", help="First operand (decimal digits)")
    parser.add_argument("y", nargs="?", help="Second operand (decimal digits)")
    parser.add_argument(
        "--backend",
        choices=[b.value for b in IntegerBackend],
        help="Integer backend (default: $KMUL_BACKEND or python)",
    )
    parser.add_argument(
        "--max-str-digits",
        type=int,
        help="Limit for decimal text conversion, 0 = unlimited "
        "(default: $KMUL_MAX_STR_DIGITS or 0)",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level (default: $KMUL_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--request",
        metavar="FILE",
        help="Read operands from a multiplication_request JSON document ('-' for stdin)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a multiplication_result JSON document",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> KaratsubaConfig:
    return KaratsubaConfig.from_env(
        backend=args.backend,
        max_str_digits=args.max_str_digits,
        log_level=args.log_level,
    )


def _read_operand(value: Optional[str], prompt: str) -> str:
    if value is not None:
        return value
    return input(prompt)


def _load_request(path: str, default_backend: str) -> MultiplicationRequest:
    """
    Чтение документа multiplication_request из файла или stdin.

    Backend документа имеет приоритет; без него берётся backend конфигурации.

    Raises:
        OSError: Если файл не читается
        ValueError: Если документ не является JSON
        jsonschema.ValidationError: Если документ не соответствует схеме
    """
    if path == "-":
        document: Any = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as f:
            document = json.load(f)

    if isinstance(document, dict):
        document.setdefault("backend", default_backend)

    return MultiplicationRequest.from_contract(document)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Точка входа CLI.

    Returns:
        Код выхода: 0 при успехе, 2 при невалидном вводе или конфигурации
    """
    args = build_parser().parse_args(argv)

    try:
        config = _resolve_config(args)
    except ValueError as e:
        print(f"kmul: invalid configuration: {e}", file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    apply_int_str_limit(config)
    logger.debug("config: %s", config)

    if args.request is not None:
        if args.x is not None or args.y is not None:
            print("kmul: operands and --request are mutually exclusive", file=sys.stderr)
            return EXIT_USAGE

        try:
            request = _load_request(args.request, config.backend.value)
        except OSError as e:
            print(f"kmul: cannot read request: {e}", file=sys.stderr)
            return EXIT_USAGE
        except jsonschema.ValidationError as e:
            print(f"kmul: invalid request: {e.message}", file=sys.stderr)
            return EXIT_USAGE
        except ValueError as e:
            print(f"kmul: invalid request: {e}", file=sys.stderr)
            return EXIT_USAGE
    else:
        try:
            x_text = _read_operand(args.x, "Enter first number: ")
            y_text = _read_operand(args.y, "Enter second number: ")
        except EOFError:
            print("kmul: expected two numbers on input", file=sys.stderr)
            return EXIT_USAGE

        try:
            request = MultiplicationRequest(x=x_text, y=y_text, backend=config.backend)
        except ValueError as e:
            print(f"kmul: {e}", file=sys.stderr)
            return EXIT_USAGE

    try:
        result = compute_product(request)
    except (ValueError, BackendUnavailableError) as e:
        print(f"kmul: {e}", file=sys.stderr)
        return EXIT_USAGE

    if args.json:
        document = result.to_contract()
        validate_multiplication_result(document)
        print(json.dumps(document, indent=2))
    else:
        # Лимит --max-str-digits ограничивает только текстовый вывод
        try:
            text = f"{result.x} x {result.y} =\n {result.product}"
        except ValueError as e:
            print(f"kmul: {e}", file=sys.stderr)
            return EXIT_USAGE
        print(text)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
