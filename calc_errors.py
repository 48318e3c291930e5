# calc_errors.py
"""
Error classes and result models for the expression calculator.

Every failure in the scan -> parse -> evaluate pipeline is raised as a
CalculatorError subclass carrying a human-readable message and, for lexical
and syntactic errors, the offset into the input where the problem starts.
Library callers that prefer values over exceptions get a Success or Failure
pydantic model from calculator.calculate().
"""

from typing import Literal, Optional, Union

from pydantic import BaseModel, Field


# ---------------------------
# Error Classes
# ---------------------------

class CalculatorError(Exception):
    """Base class for calculator errors."""
    kind = "internal"

    def __init__(self, message: str, offset: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.offset = offset

    def __repr__(self):
        return f"{type(self).__name__}({self.message!r}, offset={self.offset})"


class LexerError(CalculatorError):
    """Raised when the input contains a character outside the token set."""
    kind = "lexical"


class ParseError(CalculatorError):
    """Raised when a grammar rule cannot match the current token."""
    kind = "syntactic"


class EvalError(CalculatorError):
    """Raised when the tree holds an operator the evaluator does not know.

    Only a bug in tree construction can produce this; user input never does.
    """
    kind = "internal"


class ArgumentError(CalculatorError):
    """Raised by the CLI for an unsupported invocation shape."""
    kind = "argument"


# ---------------------------
# Result Models
# ---------------------------

ErrorKind = Literal["lexical", "syntactic", "internal", "argument"]


class Success(BaseModel):
    """Model for a successful evaluation."""
    value: float = Field(..., description="Evaluated result, may be inf or nan")

    @property
    def ok(self) -> bool:
        return True


class Failure(BaseModel):
    """Model for a failed evaluation."""
    kind: ErrorKind
    message: str
    offset: Optional[int] = Field(default=None, ge=0, description="Offset of the offending token")

    @property
    def ok(self) -> bool:
        return False

    @classmethod
    def from_error(cls, error: CalculatorError) -> "Failure":
        return cls(kind=error.kind, message=error.message, offset=error.offset)


CalculationResult = Union[Success, Failure]
