# test_calc_evaluator.py

import math
import struct

import pytest

from calc_errors import EvalError
from calc_evaluator import Evaluator, evaluate
from calc_parser import ASTNode, BinaryOp, Literal, parse
from calc_scanner import scan


def eval_expr(expr):
    return evaluate(parse(scan(expr)))

@pytest.mark.parametrize("expr,expected", [
    ("1 + 2", 3.0),
    ("1+2", 3.0),
    ("2 - 5", -3.0),
    ("2 * 3", 6.0),
    ("8 / 2", 4.0),
    ("10 / 4", 2.5),
    ("2+3*4", 14.0),
    ("2*3+4", 10.0),
    ("(2+3)*4", 20.0),
    ("2^3^2", 512.0),
    ("(2^3)^2", 64.0),
    ("2*3^2", 18.0),
    ("8-2-1", 5.0),
    ("64/4/2", 8.0),
    ("(1 + 2) * (3 + 4)", 21.0),
    ("2^0", 1.0),
])
def test_evaluator_basic(expr, expected):
    result = eval_expr(expr)
    assert isinstance(result, float)
    assert result == expected

def test_evaluator_fractional_power():
    assert math.isclose(eval_expr("2^(1/2)"), math.sqrt(2))

def test_evaluator_division_by_zero_is_infinity():
    assert eval_expr("1/0") == math.inf

def test_evaluator_negative_division_by_zero():
    assert eval_expr("(0-1)/0") == -math.inf

def test_evaluator_zero_over_zero_is_nan():
    assert math.isnan(eval_expr("0/0"))

def test_evaluator_negative_base_fractional_exponent_is_nan():
    assert math.isnan(eval_expr("(0-8)^(1/3)"))

def test_evaluator_zero_to_negative_power_is_infinity():
    assert eval_expr("0^(0-1)") == math.inf

def test_evaluator_power_overflow_is_infinity():
    assert eval_expr("10^400") == math.inf

def test_evaluator_is_idempotent():
    tree = parse(scan("(7/3)^(1/3)*11-1/9"))
    first = evaluate(tree)
    second = evaluate(tree)
    assert struct.pack('<d', first) == struct.pack('<d', second)

def test_evaluator_invalid_binary_operator():
    node = BinaryOp('%', Literal(1.0), Literal(2.0))
    with pytest.raises(EvalError) as e:
        Evaluator().eval(node)
    assert e.value.message == "unknown operator"
    assert e.value.kind == "internal"

def test_evaluator_invalid_operator_in_subtree():
    node = BinaryOp('+', Literal(1.0), BinaryOp('(', Literal(2.0), Literal(3.0)))
    with pytest.raises(EvalError):
        evaluate(node)

def test_evaluator_invalid_ast_node():
    class DummyNode(ASTNode):
        pass
    with pytest.raises(EvalError):
        Evaluator().eval(DummyNode())

def test_evaluator_long_left_deep_sum():
    assert eval_expr("+".join(["1"] * 1200)) == 1200.0

def test_evaluator_deep_tree_without_recursion():
    node = Literal(0.0)
    for _ in range(20000):
        node = BinaryOp('-', node, Literal(1.0))
    assert Evaluator().eval(node) == -20000.0

def test_evaluator_long_power_chain():
    assert eval_expr("^".join(["1"] * 500)) == 1.0
