"""
Error types for the sreader frontend.

Every error raised while reading source text carries the span of the
token that triggered it, so callers can point at the offending position.
"""

from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .lexer import Span


class ParseError(Exception):
    """Base exception for all reader failures.

    Attributes:
        message: Human readable description without position prefix
        span: Source span of the offending token
    """

    kind = "ParseError"

    def __init__(self, message: str, span: Optional["Span"] = None):
        self.message = message
        self.span = span
        super().__init__(self._format_message())

    @property
    def line(self) -> int:
        return self.span.line if self.span else 0

    @property
    def col(self) -> int:
        return self.span.col if self.span else 0

    def _format_message(self) -> str:
        if self.line > 0:
            return f"Line {self.line}, col {self.col}: {self.message}"
        return self.message


class UnmatchedClose(ParseError):
    """A closing delimiter was found with no open list to close."""

    kind = "UnmatchedClose"

    def __init__(self, span: "Span", message: str = "unexpected closing delimiter"):
        super().__init__(message, span)


class StringDecode(ParseError):
    """A string literal contains a malformed escape sequence.

    Attributes:
        cause: The underlying decoder exception
    """

    kind = "StringDecode"

    def __init__(self, span: "Span", cause: Exception):
        self.cause = cause
        super().__init__(f"invalid string literal: {cause}", span)


class UnterminatedString(ParseError):
    """Input ended before the closing quote of a string literal."""

    kind = "UnterminatedString"

    def __init__(self, span: "Span"):
        super().__init__("unterminated string literal", span)
