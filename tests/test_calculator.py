"""Test class Calculator."""
import logging
import math

import pytest

from primitive_calculator.common.errors import MalformedExpression, MismatchedParens
from primitive_calculator.common.models import format_tokens
from primitive_calculator.pipeline.calculator import Calculator


@pytest.mark.parametrize("expr,expected", [
    ("1+2*3", 7.0),
    ("(1+2)*3", 9.0),
    ("8-3-2", 3.0),
    ("2^3^2", 64.0),
    ("16/4/2", 2.0),
    ("7 + 3 * 2 - 4 / 2", 11.0),
    ("10-(1+2)", 7.0),
    ("((1+2)+3)*2", 12.0),
    ("10-(2*(3+1))", 2.0),
    ("2*(3+(4-1)*5)", 36.0),
    ("(2)", 2.0),
    ("5", 5.0),
    ("3/2", 1.5),
])
def test_calculate_valid(expr, expected):
    """Calculate returns correct result for valid expressions."""
    assert Calculator.calculate(expr) == expected


def test_calculate_division_by_zero():
    """1/0 is positive infinity."""
    assert Calculator.calculate("1/0") == math.inf


@pytest.mark.parametrize("expr", ["", "   ", "\r\n", "(1)2"])
def test_calculate_no_result(expr):
    """Expressions that do not reduce to a single value yield None."""
    assert Calculator.calculate(expr) is None


@pytest.mark.parametrize("expr", ["(1+2", ")", "1)+(2"])
def test_calculate_mismatched_parens(expr):
    """Unbalanced parentheses fail during tokenization."""
    with pytest.raises(MismatchedParens):
        Calculator.calculate(expr)


def test_calculate_deterministic():
    """Repeated invocations yield identical tokens, postfix and result."""
    expr = "(12+3)*4^2-8/3"
    runs = []
    for _ in range(3):
        tokens = Calculator.tokenize(expr)
        postfix = Calculator.to_postfix(tokens)
        runs.append((tokens, postfix, Calculator.evaluate(postfix)))
    assert runs[0] == runs[1] == runs[2]


def test_stages_log_at_debug(caplog):
    """Each stage logs its output at DEBUG level."""
    with caplog.at_level(logging.DEBUG, logger="primitive_calculator"):
        Calculator.calculate("1+2*3")
    assert "1 + 2 * 3" in caplog.text
    assert "1 2 3 * +" in caplog.text
    assert "7.0" in caplog.text


def test_postfix_rendering():
    """Tokens render back to their symbols."""
    assert format_tokens(Calculator.to_postfix(Calculator.tokenize("(1+2)^3"))) == "1 2 + 3 ^"


@pytest.mark.parametrize("expr", ["1+", "+3", "2*(3-)"])
def test_calculate_missing_operand(expr):
    """Operators without two operands surface as MalformedExpression."""
    with pytest.raises(MalformedExpression):
        Calculator.calculate(expr)
