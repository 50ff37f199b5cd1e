"""A calculator with a lexer, a Pratt parser, a tree-walk interpreter and an interactive prompt."""

__version__ = "0.1.0"