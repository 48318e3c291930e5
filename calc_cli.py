# calc_cli.py
"""
Command-line front end for the expression calculator.

Usage:
    calc "2+3*4"          # evaluate the argument
    calc                  # prompt for (or read from stdin) one line
    echo "2^3^2" | calc

Prints "ans = <value>" on success. On failure prints the input and a caret
under the offending position to stderr and exits with status 1.
"""

import argparse
import logging
import sys
from typing import List, Optional

from prompt_toolkit import prompt
from pydantic import ValidationError

from calc_config import CalcSettings, load_settings
from calc_errors import ArgumentError, Failure
from calculator import calculate, format_error

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="calc",
        description="Evaluate a single arithmetic expression (+ - * / ^ and parentheses).",
    )
    parser.add_argument(
        "expression",
        nargs="*",
        help="Expression to evaluate; read from the terminal or stdin when omitted.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        help="Logging level name (default: CALC_LOG_LEVEL or WARNING).",
    )
    parser.add_argument(
        "--format",
        dest="float_format",
        type=str,
        help="format() spec for the result, e.g. 'g' (default: CALC_FLOAT_FORMAT or plain).",
    )
    return parser


def read_expression(settings: CalcSettings) -> str:
    """
    Reads one line: prompted when stdin is a terminal, plain readline otherwise.
    """
    if sys.stdin.isatty():
        return prompt(settings.prompt)
    return sys.stdin.readline().rstrip("\r\n")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the calculator; returns the process exit status.
    """
    # An expression may start with "-", which argparse reads as an unknown option
    args, unknown = build_arg_parser().parse_known_args(argv)
    expressions = args.expression + unknown

    overrides = {}
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.float_format is not None:
        overrides["float_format"] = args.float_format
    try:
        settings = load_settings()
        if overrides:
            settings = CalcSettings(**{**settings.model_dump(), **overrides})
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if len(expressions) > 1:
        failure = Failure.from_error(ArgumentError("bad arguments"))
        logger.info(f"Rejected {len(expressions)} arguments: {expressions}")
        print(format_error("", failure), file=sys.stderr)
        return 1

    if expressions:
        text = expressions[0]
    else:
        try:
            text = read_expression(settings)
        except (EOFError, KeyboardInterrupt):
            print()  # Newline for clean exit
            print("no expression read", file=sys.stderr)
            return 1

    result = calculate(text)
    if isinstance(result, Failure):
        print(format_error(text, result), file=sys.stderr)
        return 1
    print(f"ans = {settings.format_value(result.value)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
