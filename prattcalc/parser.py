"""Pratt parser turning tokens into S-expressions."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Optional, Union

from .lexer import CalculatorError, Token, TokenKind, _format_number, tokenize


class ParseError(CalculatorError):
    """Raised when a token sequence does not form a valid expression."""


class AtomKind(enum.Enum):
    OP = "op"
    VARIABLE = "variable"
    NUMBER = "number"


@dataclass(frozen=True)
class Atom:
    """A leaf of an S-expression: an operator, a variable name or a number."""

    kind: AtomKind
    value: Union[str, float]

    def __str__(self) -> str:
        if self.kind is AtomKind.NUMBER:
            return _format_number(self.value)
        return str(self.value)


@dataclass(frozen=True)
class Cons:
    """An operator applied to one or more operand expressions."""

    op: Atom
    operands: tuple

    def __str__(self) -> str:
        parts = [str(self.op), *(str(operand) for operand in self.operands)]
        return "(" + " ".join(parts) + ")"


SExpr = Union[Atom, Cons]


def infix_binding_power(op: str) -> Optional[tuple[int, int]]:
    """Left and right binding power of an infix operator, or None."""
    if op == "=":
        return (2, 1)
    if op in ("+", "-"):
        return (3, 4)
    if op == "^":
        return (6, 5)
    if op in ("*", "/"):
        return (7, 8)
    return None


def prefix_binding_power(op: str) -> int:
    """Right binding power of a prefix operator."""
    if op in ("+", "-"):
        return 9
    raise ParseError(f"Character {op} does not have an associated prefix binding power")


def postfix_binding_power(op: str) -> Optional[int]:
    """Left binding power of a postfix operator, or None."""
    if op == "!":
        return 11
    return None


def _op(symbol: str) -> Atom:
    return Atom(AtomKind.OP, symbol)


class PrattParser:
    """Parses the tokens of one input line into an S-expression."""

    def __init__(self, text: str) -> None:
        self._tokens: deque[Token] = deque(tokenize(text))

    def _peek(self) -> Token:
        return self._tokens[0] if self._tokens else Token.eof()

    def _pop(self) -> Token:
        return self._tokens.popleft() if self._tokens else Token.eof()

    def _parse_head(self) -> SExpr:
        token = self._pop()
        if token.kind is TokenKind.NUMBER:
            return Atom(AtomKind.NUMBER, token.value)
        if token.kind is TokenKind.VARIABLE:
            return Atom(AtomKind.VARIABLE, token.value)
        if token.kind is TokenKind.OP:
            if token.value == "(":
                inner = self.parse_expression(0)
                if self._pop() != Token.op(")"):
                    raise ParseError("Unmatched parenthesis encountered during parsing")
                return inner
            bp = prefix_binding_power(token.value)
            operand = self.parse_expression(bp)
            return Cons(_op(token.value), (operand,))
        raise ParseError(f"Encountered bad token during parsing {token}")

    def parse_expression(self, min_bp: int) -> SExpr:
        """Parse an expression whose operators bind at least as tightly as min_bp."""
        lhs = self._parse_head()
        while True:
            token = self._peek()
            if token.kind is TokenKind.EOF:
                break
            if token.kind is not TokenKind.OP:
                raise ParseError(
                    f"Encountered unknown token {token} during rhs parsing loop"
                )
            op = token.value

            postfix_bp = postfix_binding_power(op)
            if postfix_bp is not None:
                if postfix_bp < min_bp:
                    break
                self._pop()
                lhs = Cons(_op(op), (lhs,))
                continue

            infix_bp = infix_binding_power(op)
            if infix_bp is not None:
                left_bp, right_bp = infix_bp
                if left_bp < min_bp:
                    break
                self._pop()
                rhs = self.parse_expression(right_bp)
                lhs = Cons(_op(op), (lhs, rhs))
                continue

            break
        return lhs


def parse(text: str) -> SExpr:
    """Parse a line of input into an S-expression."""
    return PrattParser(text).parse_expression(0)