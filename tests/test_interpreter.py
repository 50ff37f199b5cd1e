import math

import pytest

from prattcalc.interpreter import EvaluationError, Interpreter
from prattcalc.lexer import CalculatorError, LexError
from prattcalc.parser import Atom, AtomKind, Cons, ParseError


@pytest.fixture
def interpreter():
    return Interpreter()


def test_atom(interpreter):
    assert interpreter.interpret("3") == 3.0


def test_binary_operator(interpreter):
    assert interpreter.interpret("3+4") == 7.0
    assert interpreter.interpret("3*4") == 12.0
    assert interpreter.interpret("2^3") == 8.0


def test_postfix_operator(interpreter):
    assert interpreter.interpret("3!") == 6.0


def test_variable_assignment(interpreter):
    assert interpreter.interpret("a=3") == 3.0
    assert interpreter.interpret("a+4") == 7.0
    assert interpreter.environment == {"a": 3.0}


def test_prefix_minus_and_plus(interpreter):
    assert interpreter.interpret("-3") == -3.0
    assert interpreter.interpret("+3") == 3.0


def test_negative_factorial_keeps_sign(interpreter):
    assert interpreter.interpret("(-3)!") == -6.0


def test_zero_factorial_is_one(interpreter):
    assert interpreter.interpret("0!") == 1.0


def test_undefined_variable(interpreter):
    with pytest.raises(EvaluationError):
        interpreter.interpret("missing + 1")


def test_assignment_to_number_fails(interpreter):
    with pytest.raises(EvaluationError):
        interpreter.interpret("3=4")
    assert interpreter.environment == {}


def test_division_by_zero_gives_infinity(interpreter):
    assert interpreter.interpret("1/0") == math.inf
    assert interpreter.interpret("-1/0") == -math.inf
    assert math.isnan(interpreter.interpret("0/0"))


def test_fractional_power_of_negative_is_nan(interpreter):
    result = interpreter.interpret("(-2)^0.5")
    assert repr(result) == "nan"


def test_power_overflow_is_infinity(interpreter):
    assert interpreter.interpret("10^400") == math.inf


def test_chained_assignment(interpreter):
    assert interpreter.interpret("a=b=2") == 2.0
    assert interpreter.environment == {"a": 2.0, "b": 2.0}


def test_lex_error_propagates(interpreter):
    with pytest.raises(LexError):
        interpreter.interpret("3 $ 4")


def test_parse_error_propagates(interpreter):
    with pytest.raises(ParseError):
        interpreter.interpret("3 4")


def test_errors_share_base_class(interpreter):
    with pytest.raises(CalculatorError):
        interpreter.interpret("undefined")


def test_evaluate_bare_operator_fails(interpreter):
    with pytest.raises(EvaluationError):
        interpreter.evaluate(Atom(AtomKind.OP, "+"))


def test_evaluate_number_as_operator_fails(interpreter):
    expr = Cons(Atom(AtomKind.NUMBER, 1.0), (Atom(AtomKind.NUMBER, 2.0),))
    with pytest.raises(EvaluationError):
        interpreter.evaluate(expr)


def test_evaluate_wrong_arity_fails(interpreter):
    expr = Cons(Atom(AtomKind.OP, "*"), (Atom(AtomKind.NUMBER, 2.0),))
    with pytest.raises(EvaluationError):
        interpreter.evaluate(expr)


def test_evaluate_tree_directly(interpreter):
    expr = Cons(
        Atom(AtomKind.OP, "+"),
        (Atom(AtomKind.NUMBER, 3.0), Atom(AtomKind.NUMBER, 4.0)),
    )
    assert interpreter.evaluate(expr) == 7.0