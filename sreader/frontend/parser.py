"""
Parser module for sreader.

Turns the lexer's token stream into a tree of expression nodes. Nesting is
tracked with an explicit stack of open frames instead of recursion, so the
depth of the input is bounded only by memory.
"""

import json
import math
import re
from typing import Iterable, List, Optional

from ..ir import Number, Symbol, StringLiteral, ListExpr, Expr
from .errors import StringDecode, UnmatchedClose
from .lexer import Lexer, Token, TokenType


# Decimal literal: optional sign, digits with optional fraction (or a bare
# fraction), optional exponent.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_number(text: str) -> Optional[float]:
    """Parse an atom as a decimal number.

    Args:
        text: Raw atom text

    Returns:
        The float value, or None if the text is not a finite decimal number
    """
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = float(text)
    if math.isinf(value):
        return None
    return value


def decode_string(token: Token) -> str:
    """Decode a string token using JSON escape rules.

    Raw control characters between the quotes are accepted.

    Raises:
        StringDecode: If the literal contains a malformed escape
    """
    try:
        return json.loads(token.text, strict=False)
    except json.JSONDecodeError as e:
        raise StringDecode(token.span, e) from e


class Parser:
    """Stack-based parser for S-expressions.

    The parser holds no per-call state, so one instance can be shared.

    Example:
        >>> parser = Parser()
        >>> parser.parse('(lambda (x) (concat "Hello" x))')
        [ListExpr(items=(Symbol(name='lambda'), ...))]
    """

    def __init__(self, lenient_strings: bool = False):
        """Initialize the parser.

        Args:
            lenient_strings: Let unterminated string literals reach the
                decoder instead of failing in the lexer
        """
        self._lexer = Lexer(lenient_strings=lenient_strings)

    def parse(self, source: str) -> List[Expr]:
        """Parse source text into top-level expressions.

        Args:
            source: S-expression source string

        Returns:
            List of top-level expressions in source order

        Raises:
            UnmatchedClose: If a closing delimiter has nothing to close
            StringDecode: If a string literal cannot be decoded
            UnterminatedString: If a string literal is never closed
        """
        return self.parse_tokens(self._lexer.tokenize_iter(source))

    def parse_tokens(self, tokens: Iterable[Token]) -> List[Expr]:
        """Parse an already tokenized source.

        Args:
            tokens: Tokens in source order

        Returns:
            List of top-level expressions in source order
        """
        # The bottom frame is the implicit top level and is never popped.
        stack: List[List[Expr]] = [[]]

        for token in tokens:
            if token.type == TokenType.OPEN:
                stack.append([])

            elif token.type == TokenType.CLOSE:
                if len(stack) == 1:
                    raise UnmatchedClose(token.span)
                frame = stack.pop()
                stack[-1].append(ListExpr(tuple(frame)))

            elif token.type == TokenType.STRING:
                stack[-1].append(StringLiteral(decode_string(token)))

            else:
                value = parse_number(token.text)
                if value is None:
                    stack[-1].append(Symbol(token.text))
                else:
                    stack[-1].append(Number(value))

        # Missing closing delimiters are not an error.
        while len(stack) > 1:
            frame = stack.pop()
            stack[-1].append(ListExpr(tuple(frame)))

        return stack[0]


def parse(source: str, lenient_strings: bool = False) -> List[Expr]:
    """Parse S-expression source text.

    Args:
        source: S-expression source string
        lenient_strings: Pass unterminated string literals to the decoder

    Returns:
        List of top-level expressions
    """
    return Parser(lenient_strings=lenient_strings).parse(source)
