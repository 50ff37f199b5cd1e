# prattcalc

An interactive calculator. Each line you type is split into tokens, parsed into an
S-expression with a Pratt parser, and then evaluated by a tree-walk interpreter.
Variables you assign are kept for the rest of the session.

## Installation

```
pip install .
```

## Interactive use

```
prattcalc
```

The calculator prints a welcome text and its version, then shows a `>>` prompt.
Type an expression and press Enter to see its value. Whole-number results are shown
without a fractional part. If a line cannot be evaluated, the calculator prints
`Interpreter Error: ...` and shows the prompt again. Press Ctrl-D or Ctrl-C to quit.
The calculator prints `Quitting...` when it stops.

```
>>3 + 5 * 6
33
>>a = 2 ^ 3
8
>>a + 1
9
>>4!
24
>>1 / 4
0.25
```

## Syntax

| Syntax | Meaning |
|--------|---------|
| `+`, `-` | addition and subtraction, or a sign when written in front of a value |
| `*`, `/` | multiplication and division |
| `^` | exponentiation, right-associative |
| `!` | postfix factorial |
| `=` | assigns a value to a variable and gives that value, right-associative |
| `( )` | grouping |

Operators bind in this order, from weakest to strongest: `=`, then `+` and `-`,
then `^`, then `*` and `/`, then a leading sign, then `!`. Because a leading sign
binds more tightly than `^`, `-2^2` is `(-2)^2`, which is `4`.

The factorial truncates its operand to a whole number. A negative operand gives the
negated factorial of its absolute value, so `(-3)!` is `-6`. The calculation uses
32-bit integer arithmetic, so large factorials wrap around.

Division by zero and out-of-range powers give `inf`, `-inf` or `NaN` instead of an
error.

Numbers are decimal and start with a digit, for example `3`, `3.14` or `3.`. A
number with two decimal points is an error. A variable name starts with a letter or
`_` and may go on with letters, digits and `_`. Reading a variable that has not been
assigned is an error.

## Library use

```python
from prattcalc.lexer import tokenize
from prattcalc.parser import parse
from prattcalc.interpreter import Interpreter

tokenize("a+1")                    # tokens for a, +, 1, then an EOF token
print(parse("3+5*6"))              # (+ 3 (* 5 6))

calc = Interpreter()
calc.interpret("a = 3")            # 3.0
calc.interpret("a + 4")            # 7.0
calc.environment                   # {'a': 3.0}
calc.evaluate(parse("a * 2"))      # 6.0
```

- `prattcalc.lexer`: `tokenize(text)` returns a list of `Token` objects. Each token
  has a `kind` (a `TokenKind`) and a `value`. The list always ends with an EOF token.
- `prattcalc.parser`: `parse(text)` returns an S-expression. It is an `Atom` (a
  number, a variable or an operator) or a `Cons` (an operator `Atom` with a tuple of
  operands). Both print in prefix form. `PrattParser(text).parse_expression(min_bp)`
  and the functions `infix_binding_power`, `prefix_binding_power` and
  `postfix_binding_power` give lower-level access.
- `prattcalc.interpreter`: `Interpreter` keeps assigned variables in its
  `environment` dict. `interpret(text)` parses and evaluates a line, and
  `evaluate(expr)` evaluates an already parsed expression.
- `prattcalc.cli`: `run_repl(interpreter, read_line, write)` runs the prompt loop
  with any input and output functions. `main()` is the `prattcalc` command.

Errors are raised as exceptions. `LexError` is raised for bad characters or
malformed numbers, `ParseError` for malformed expressions, and `EvaluationError` for
problems such as reading a variable that was never assigned. All three derive from
`prattcalc.lexer.CalculatorError`.

## Running the tests

```
pip install ".[test]"
pytest
```