# calc_scanner.py
"""
Scanner: converts an input line into tokens.

Produces NumberToken, OperatorToken and a terminating EndToken, each recording
the offset in the input where it begins. Only ASCII digits, ASCII whitespace
and the characters * / + - ( ) ^ are accepted; anything else, including any
non-ASCII character, is reported as an unknown token at its own offset.
"""

import logging
from dataclasses import dataclass
from typing import List, Union

from calc_errors import LexerError

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")
WHITESPACE = frozenset(" \t\n\r\x0b\x0c")
OPERATORS = frozenset("*/+-()^")


# ---------------------------
# Tokens
# ---------------------------

@dataclass(frozen=True)
class NumberToken:
    """A run of decimal digits converted to a float."""
    value: float
    offset: int


@dataclass(frozen=True)
class OperatorToken:
    """One of the single-character operators or parentheses."""
    symbol: str
    offset: int


@dataclass(frozen=True)
class EndToken:
    offset: int


Token = Union[NumberToken, OperatorToken, EndToken]


# ---------------------------
# Scanner
# ---------------------------

class Scanner:
    """
    Converts an input string into a list of tokens.
    """
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.len = len(text)

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < self.len else ''

    def _skip_whitespace(self) -> None:
        while self.pos < self.len and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def _read_number(self) -> NumberToken:
        start = self.pos
        while self.pos < self.len and self.text[self.pos] in DIGITS:
            self.pos += 1
        # float() follows strtod here: an over-long run becomes inf, not an error
        return NumberToken(float(self.text[start:self.pos]), start)

    def tokenize(self) -> List[Token]:
        """
        Scans the whole input and returns its tokens, ending with EndToken.

        Raises:
            LexerError: on the first character that is not part of the grammar
        """
        tokens: List[Token] = []
        while True:
            self._skip_whitespace()
            ch = self._peek()
            if not ch:
                break
            if ch in DIGITS:
                tokens.append(self._read_number())
            elif ch in OPERATORS:
                tokens.append(OperatorToken(ch, self.pos))
                self.pos += 1
            else:
                raise LexerError("unknown token", self.pos)
        tokens.append(EndToken(self.len))
        logger.debug(f"Scanned {len(tokens)} tokens from {self.text!r}")
        return tokens


def scan(text: str) -> List[Token]:
    return Scanner(text).tokenize()
