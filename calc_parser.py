# calc_parser.py
"""
Recursive descent parser for arithmetic expressions.

Grammar (lowest to highest precedence):
    expression : term (("+" | "-") term)*
    term       : power (("*" | "/") power)*
    power      : atom ("^" power)?
    atom       : NUMBER | "(" expression ")"

The "+ -" and "* /" levels loop and fold each new operand into the tree built
so far, which makes them left-associative. The "^" level recurses into itself
for its right operand, so 2^3^2 groups as 2^(3^2).
"""

import logging
from dataclasses import dataclass
from typing import List, Sequence

from calc_errors import ParseError
from calc_scanner import EndToken, NumberToken, OperatorToken, Token

logger = logging.getLogger(__name__)


# ---------------------------
# AST Nodes
# ---------------------------

class ASTNode:
    """
    Base class for AST nodes.
    """
    pass


@dataclass(frozen=True)
class Literal(ASTNode):
    """
    Represents a numeric literal in the AST.
    """
    value: float


@dataclass(frozen=True)
class BinaryOp(ASTNode):
    """
    Represents a binary operation (e.g., 1 + 2) in the AST.
    """
    op: str
    left: ASTNode
    right: ASTNode


# ---------------------------
# Parser
# ---------------------------

class Parser:
    """
    Walks a token list with a single forward-only cursor.
    """
    def __init__(self, tokens: Sequence[Token]):
        if not tokens or not isinstance(tokens[-1], EndToken):
            raise ValueError("token list must end with EndToken")
        self.tokens = tokens
        self.pos = 0

    def _current(self) -> Token:
        return self.tokens[self.pos]

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        if not isinstance(tok, EndToken):
            self.pos += 1
        return tok

    def _at_operator(self, symbols: str) -> bool:
        tok = self._current()
        return isinstance(tok, OperatorToken) and tok.symbol in symbols

    def parse(self) -> ASTNode:
        """
        Parses a complete expression and requires that nothing follows it.

        Parentheses and "^" chains recurse, so input nested past the
        interpreter's recursion limit is reported as a ParseError at the
        token where parsing stopped.
        """
        try:
            node = self.parse_expression()
        except RecursionError:
            raise ParseError("expression too deeply nested", self._current().offset)
        tok = self._current()
        if not isinstance(tok, EndToken):
            raise ParseError("unexpected token", tok.offset)
        return node

    def parse_expression(self) -> ASTNode:
        """
        expression : term (("+" | "-") term)*

        Leaves the cursor on the first token it could not use.
        """
        node = self.term()
        while self._at_operator("+-"):
            op = self._advance().symbol
            node = BinaryOp(op, node, self.term())
        return node

    def term(self) -> ASTNode:
        node = self.power()
        while self._at_operator("*/"):
            op = self._advance().symbol
            node = BinaryOp(op, node, self.power())
        return node

    def power(self) -> ASTNode:
        node = self.atom()
        if self._at_operator("^"):
            self._advance()
            node = BinaryOp("^", node, self.power())
        return node

    def atom(self) -> ASTNode:
        tok = self._current()
        if isinstance(tok, NumberToken):
            self._advance()
            return Literal(tok.value)
        if self._at_operator("("):
            self._advance()
            node = self.parse_expression()
            if not self._at_operator(")"):
                raise ParseError("')' expected", self._current().offset)
            self._advance()
            return node
        raise ParseError("not a number", tok.offset)


def parse(tokens: List[Token]) -> ASTNode:
    node = Parser(tokens).parse()
    logger.debug("Parsed %d tokens", len(tokens))
    return node
