# calculator.py
"""
Expression calculator pipeline: scan, parse, evaluate.

evaluate_expression() raises CalculatorError subclasses, calculate() returns a
Success or Failure model instead, and format_error() renders a failure as the
two-line caret diagram used by the command line tool.
"""

import logging

from calc_errors import CalculationResult, CalculatorError, Failure, Success
from calc_evaluator import evaluate
from calc_parser import parse
from calc_scanner import scan

logger = logging.getLogger(__name__)


def evaluate_expression(text: str) -> float:
    """
    Evaluates one arithmetic expression.

    Args:
        text: Expression such as "(2+3)*4"

    Returns:
        The float result; division by zero gives inf or nan

    Raises:
        LexerError: on a character outside the supported set
        ParseError: on input that does not match the grammar
    """
    return evaluate(parse(scan(text)))


def calculate(text: str) -> CalculationResult:
    """
    Evaluates one arithmetic expression without raising for bad input.
    """
    try:
        value = evaluate_expression(text)
    except CalculatorError as e:
        logger.info(f"Failed to evaluate {text!r}: {e.kind} error: {e.message}")
        return Failure.from_error(e)
    return Success(value=value)


def format_error(text: str, failure: Failure) -> str:
    """
    Renders a failure for the error stream.

    With an offset this is the input line followed by a caret under the
    offending character:

        2+a
          ^ unknown token

    Without one it is just the message.
    """
    if failure.offset is None:
        return failure.message
    return f"{text}\n{' ' * failure.offset}^ {failure.message}"
