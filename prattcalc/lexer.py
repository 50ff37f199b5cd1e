"""Turn calculator input text into a flat sequence of tokens."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

OPERATORS = frozenset("()*/+-^!=")
_DIGITS = frozenset("0123456789")
_VARIABLE_START = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_"
)


class CalculatorError(Exception):
    """Base class for every error the calculator reports."""


class LexError(CalculatorError):
    """Raised when input text cannot be split into tokens."""


class TokenKind(enum.Enum):
    OP = "op"
    NUMBER = "number"
    VARIABLE = "variable"
    EOF = "eof"


def _format_number(value: float) -> str:
    """Render a float as plain decimal digits, dropping a zero fraction."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class Token:
    """A single lexical token: an operator, a number, a variable or end of input."""

    kind: TokenKind
    value: Union[str, float, None] = None

    @classmethod
    def op(cls, symbol: str) -> Token:
        if len(symbol) != 1:
            raise LexError(f"Operator must be a single character, got {symbol!r}")
        return cls(TokenKind.OP, symbol)

    @classmethod
    def number(cls, text: str) -> Token:
        try:
            value = float(text)
        except ValueError as exc:
            raise LexError(f"Failed to parse number: {text!r}") from exc
        return cls(TokenKind.NUMBER, value)

    @classmethod
    def variable(cls, name: str) -> Token:
        return cls(TokenKind.VARIABLE, name)

    @classmethod
    def eof(cls) -> Token:
        return cls(TokenKind.EOF)

    def __str__(self) -> str:
        if self.kind is TokenKind.EOF:
            return "EOF"
        if self.kind is TokenKind.NUMBER:
            return _format_number(self.value)
        return str(self.value)


def _is_variable_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


def tokenize(text: str) -> list[Token]:
    """Split text into tokens; the result always ends with an EOF token."""
    source = text.strip()
    length = len(source)
    tokens: list[Token] = []
    pos = 0
    while pos < length:
        start = pos
        ch = source[pos]
        pos += 1
        if ch in OPERATORS:
            tokens.append(Token.op(ch))
        elif ch in _VARIABLE_START:
            while pos < length and _is_variable_char(source[pos]):
                pos += 1
            tokens.append(Token.variable(source[start:pos]))
        elif ch in _DIGITS:
            seen_decimal = False
            while pos < length:
                current = source[pos]
                if current in _DIGITS:
                    pos += 1
                elif current == ".":
                    if seen_decimal:
                        raise LexError(
                            "Encountered two decimal points in single number during lexing"
                        )
                    seen_decimal = True
                    pos += 1
                else:
                    break
            tokens.append(Token.number(source[start:pos]))
        elif ch.isspace():
            continue
        else:
            raise LexError(f"Unexpected character encountered during lexing: {ch}")
    tokens.append(Token.eof())
    return tokens