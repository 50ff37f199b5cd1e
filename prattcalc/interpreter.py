"""Tree-walk evaluation of parsed calculator expressions."""

from __future__ import annotations

import math
from typing import Optional

from .lexer import CalculatorError
from .parser import Atom, AtomKind, Cons, SExpr, parse

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MASK = 2**32 - 1


class EvaluationError(CalculatorError):
    """Raised when a parsed expression cannot be evaluated."""


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _divide(lhs: float, rhs: float) -> float:
    """Floating point division following IEEE 754 for a zero divisor."""
    if rhs != 0:
        return lhs / rhs
    if lhs == 0 or math.isnan(lhs):
        return math.nan
    sign = math.copysign(1.0, lhs) * math.copysign(1.0, rhs)
    return math.copysign(math.inf, sign)


def _power(base: float, exponent: float) -> float:
    """Raise base to exponent, giving inf or NaN where IEEE 754 does."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0 and exponent < 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


def _to_i32(value: float) -> int:
    """Truncate a float to a 32-bit signed integer, saturating at the limits."""
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return int(value)


def _wrap_i32(value: int) -> int:
    value &= _U32_MASK
    return value - 2**32 if value > _I32_MAX else value


def _factorial(value: float) -> float:
    """Signed factorial of the truncated value, in 32-bit wrapping arithmetic."""
    n = _to_i32(value)
    counter = abs(n) if n != _I32_MIN else _I32_MIN
    product = 1
    while counter > 0 and product != 0:
        product = (product * counter) & _U32_MASK
        counter -= 1
    result = _wrap_i32(product)
    if n < 0:
        result = _wrap_i32(-result)
    return float(result)


_BINARY_OPERATIONS = {
    "+": lambda lhs, rhs: lhs + rhs,
    "-": lambda lhs, rhs: lhs - rhs,
    "*": lambda lhs, rhs: lhs * rhs,
    "/": _divide,
    "^": _power,
}


class Interpreter:
    """Evaluates calculator input, keeping assigned variables between calls."""

    def __init__(self) -> None:
        self.environment: dict[str, float] = {}

    def interpret(self, text: str) -> float:
        """Parse and evaluate one line of input."""
        return self.evaluate(parse(text))

    def evaluate(self, expr: SExpr) -> float:
        """Evaluate an S-expression to a number."""
        if isinstance(expr, Atom):
            return self._evaluate_atom(expr)
        return self._evaluate_cons(expr)

    def _evaluate_atom(self, atom: Atom) -> float:
        if atom.kind is AtomKind.NUMBER:
            return float(atom.value)
        if atom.kind is AtomKind.VARIABLE:
            try:
                return self.environment[atom.value]
            except KeyError:
                raise EvaluationError(
                    "Tried to access variable with no value assigned"
                ) from None
        raise EvaluationError(
            "Encountered operator as S-expression atom with no operands"
        )

    def _evaluate_cons(self, expr: Cons) -> float:
        operator = expr.op
        if operator.kind is not AtomKind.OP:
            raise EvaluationError(
                f"Encountered a variable or number ({operator}) as operator in S-expression"
            )
        op = operator.value
        operands = expr.operands
        arity = len(operands)

        if op in ("+", "-") and arity == 1:
            value = self.evaluate(operands[0])
            return value * (1.0 if op == "+" else -1.0)

        if op in _BINARY_OPERATIONS and arity == 2:
            lhs_expr, rhs_expr = operands
            lhs = self.evaluate(lhs_expr)
            rhs = self.evaluate(rhs_expr)
            return _BINARY_OPERATIONS[op](lhs, rhs)

        if op == "=" and arity == 2:
            target, value_expr = operands
            value = self.evaluate(value_expr)
            name = self._assignment_target(target)
            self.environment[name] = value
            return value

        if op == "!" and arity == 1:
            return _factorial(self.evaluate(operands[0]))

        rendered = ", ".join(str(operand) for operand in operands)
        raise EvaluationError(
            f"Encountered invalid S-expression ({operator} [{rendered}])"
        )

    @staticmethod
    def _assignment_target(target: SExpr) -> str:
        name: Optional[str] = None
        if isinstance(target, Atom) and target.kind is AtomKind.VARIABLE:
            name = target.value
        if name is None:
            raise EvaluationError(
                f"Invalid lhs of assignment operator encountered: {target}"
            )
        return name