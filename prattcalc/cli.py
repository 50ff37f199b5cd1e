"""Interactive read-evaluate-print loop for the calculator."""

from __future__ import annotations

import argparse
from typing import Callable, Optional, Sequence

from .interpreter import Interpreter
from .lexer import CalculatorError, _format_number

try:
    import readline  # noqa: F401  (enables line editing for input())
except ImportError:
    pass

VERSION = "0.1.0"
PROMPT = ">>"

WELCOME = """
            Welcome to Pratt Calculator!
            This calculator uses Pratt parsing to understand the input,
            and then a simple Tree-Walk interpreter to calculate the result.
            Currently, it can handle:
                + (addition)
                - (subtraction or prefix),
                * (multiplication)
                / (division)
                ^ (exponentiation)
            as well as parenthesis, and simple variable assignment.
            Thank you for trying out Pratt Calculator!
        """


def run_repl(
    interpreter: Interpreter,
    read_line: Callable[[str], str],
    write: Callable[[str], object],
) -> None:
    """Read lines until end of input or interrupt, writing each result."""
    while True:
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            write("Quitting...")
            return
        except OSError as exc:
            write(f"Error: {exc}")
            return
        try:
            result = interpreter.interpret(line)
        except CalculatorError as exc:
            write(f"Interpreter Error: {exc}")
        else:
            write(_format_number(result))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive calculator."""
    arg_parser = argparse.ArgumentParser(
        prog="prattcalc",
        description="A simple calculator built using Pratt parsing",
    )
    arg_parser.parse_args(argv)
    print(WELCOME, end="")
    print(f"Version {VERSION}")
    run_repl(Interpreter(), input, print)
    return 0