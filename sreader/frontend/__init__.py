"""
Frontend module for sreader.

This module provides the lexer, the parser and the error types raised
while reading S-expression source text.
"""

from .errors import ParseError, UnmatchedClose, StringDecode, UnterminatedString
from .lexer import Lexer, Token, TokenType, Span, tokenize_source
from .parser import Parser, parse

__all__ = [
    # Lexer components
    "Lexer",
    "Token",
    "TokenType",
    "Span",
    "tokenize_source",
    # Parser components
    "Parser",
    "parse",
    # Errors
    "ParseError",
    "UnmatchedClose",
    "StringDecode",
    "UnterminatedString",
]
