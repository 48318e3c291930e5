# calc_evaluator.py
"""
Evaluates an expression tree to a float.

Arithmetic runs on numpy float64 ufuncs so division and exponentiation keep
IEEE 754 / C pow behavior: 1/0 is inf, 0/0 is nan, (-8)^(1/3) is nan and
overflow is inf. None of these raise.
"""

import logging

import numpy as np

from calc_errors import EvalError
from calc_parser import ASTNode, BinaryOp, Literal

logger = logging.getLogger(__name__)

BINARY_OPS = {
    '+': np.add,
    '-': np.subtract,
    '*': np.multiply,
    '/': np.divide,
    '^': np.power,
}


class Evaluator:
    """
    Evaluates an AST post-order. Holds no state between calls.

    Uses an explicit stack instead of recursion so long left-deep chains such
    as 1+1+...+1 evaluate regardless of the interpreter's recursion limit.
    """
    def eval(self, node: ASTNode) -> float:
        """
        Evaluates the AST node, left operand before right.

        Raises:
            EvalError: if the tree holds an unknown operator or node type
        """
        pending = [(node, False)]
        values = []
        while pending:
            current, operands_done = pending.pop()
            if isinstance(current, Literal):
                values.append(float(current.value))
            elif isinstance(current, BinaryOp):
                func = BINARY_OPS.get(current.op)
                if func is None:
                    raise EvalError("unknown operator")
                if not operands_done:
                    pending.append((current, True))
                    pending.append((current.right, False))
                    pending.append((current.left, False))
                    continue
                right = values.pop()
                left = values.pop()
                with np.errstate(all='ignore'):
                    values.append(float(func(np.float64(left), np.float64(right))))
            else:
                raise EvalError("unknown operator")
        return values.pop()


def evaluate(node: ASTNode) -> float:
    result = Evaluator().eval(node)
    logger.debug(f"Evaluated to {result!r}")
    return result
