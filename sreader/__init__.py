"""
sreader - S-expression reader

Reads a small Lisp-like notation into an expression tree with source
positions for diagnostics, and prints trees back to source text.
Comments, string literals, numbers, symbols and any of ( [ { as list
brackets are supported.

Example:
    >>> from sreader import parse, stringify
    >>> exprs = parse('(lambda (x) (concat "Hello" x))')
    >>> print(stringify(exprs))
    (lambda (x) (concat "Hello" x))

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "sreader Team"

from .frontend import (
    Lexer,
    Parser,
    Token,
    TokenType,
    Span,
    ParseError,
    UnmatchedClose,
    StringDecode,
    UnterminatedString,
    parse,
)
from .ir import Number, Symbol, StringLiteral, ListExpr, Expr
from .backend import stringify, stringify_expr, dump
from .core import Reader, ReadResult
from .utils import Settings, DEFAULT_SETTINGS

__all__ = [
    "__version__",
    "__author__",
    "parse",
    "stringify",
    "stringify_expr",
    "dump",
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "Span",
    "Number",
    "Symbol",
    "StringLiteral",
    "ListExpr",
    "Expr",
    "ParseError",
    "UnmatchedClose",
    "StringDecode",
    "UnterminatedString",
    "Reader",
    "ReadResult",
    "Settings",
    "DEFAULT_SETTINGS",
]
