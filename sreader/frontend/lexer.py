"""
Lexer module for sreader.

Scans S-expression source text into a flat sequence of positioned tokens.
Comments and whitespace are dropped; bracket characters are folded into a
single open kind and a single close kind.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Iterator, Optional, Tuple

from .errors import UnterminatedString


OPEN_TEXT = "("
CLOSE_TEXT = ")"


class TokenType(Enum):
    """Token types produced by the lexer."""
    OPEN = auto()        # ( [ {
    CLOSE = auto()       # ) ] }
    STRING = auto()      # "..." including both quotes
    ATOM = auto()        # Number or symbol, decided by the parser


@dataclass(frozen=True)
class Span:
    """Location of a token in the source text.

    Attributes:
        start_offset: Offset of the first character (0-indexed)
        end_offset: Offset one past the last character
        line: Line number (1-indexed)
        col: Column number (1-indexed)
    """
    start_offset: int
    end_offset: int
    line: int
    col: int


@dataclass(frozen=True)
class Token:
    """Represents a token in the source text.

    Attributes:
        type: The token type
        text: Raw token text; delimiters carry the canonical "(" or ")"
        span: Where the token was found
    """
    type: TokenType
    text: str
    span: Span

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r}, line={self.span.line}, col={self.span.col})"


def _advance_position(text: str, line: int, col: int) -> Tuple[int, int]:
    """Return the line/column reached after consuming ``text``."""
    newlines = text.count("\n")
    if newlines:
        return line + newlines, len(text) - text.rfind("\n")
    return line, col + len(text)


class Lexer:
    """Lexer for S-expression source text.

    Example:
        >>> lexer = Lexer()
        >>> for token in lexer.tokenize('(concat "Hello" x)'):
        ...     print(token)
    """

    _OPEN_CHARS = frozenset("([{")
    _CLOSE_CHARS = frozenset(")]}")

    # Characters that end an atom in addition to whitespace
    _ATOM_STOP = frozenset('()[]{}";')

    def __init__(self, lenient_strings: bool = False):
        """Initialize the lexer.

        Args:
            lenient_strings: Emit unterminated string literals as tokens
                instead of raising UnterminatedString
        """
        self.lenient_strings = lenient_strings

    def tokenize(self, source: str) -> List[Token]:
        """Tokenize source text.

        Args:
            source: S-expression source string

        Returns:
            List of Token objects

        Raises:
            UnterminatedString: If a string literal is never closed and
                lenient mode is off
        """
        return list(self.tokenize_iter(source))

    def tokenize_iter(self, source: str) -> Iterator[Token]:
        """Tokenize source text lazily.

        Args:
            source: S-expression source string

        Yields:
            Token objects one at a time
        """
        length = len(source)
        pos = 0
        line = 1
        col = 1

        while pos < length:
            ch = source[pos]

            if ch == ";":
                end = source.find("\n", pos)
                if end == -1:
                    end = length
                col += end - pos
                pos = end

            elif ch in self._OPEN_CHARS:
                yield Token(TokenType.OPEN, OPEN_TEXT, Span(pos, pos + 1, line, col))
                pos += 1
                col += 1

            elif ch in self._CLOSE_CHARS:
                yield Token(TokenType.CLOSE, CLOSE_TEXT, Span(pos, pos + 1, line, col))
                pos += 1
                col += 1

            elif ch == '"':
                end = self._scan_string(source, pos)
                if end is None:
                    if not self.lenient_strings:
                        raise UnterminatedString(Span(pos, length, line, col))
                    end = length
                text = source[pos:end]
                yield Token(TokenType.STRING, text, Span(pos, end, line, col))
                line, col = _advance_position(text, line, col)
                pos = end

            elif ord(ch) <= 32:
                if ch == "\n":
                    line += 1
                    col = 1
                else:
                    col += 1
                pos += 1

            else:
                end = pos + 1
                while end < length and source[end] not in self._ATOM_STOP and ord(source[end]) > 32:
                    end += 1
                yield Token(TokenType.ATOM, source[pos:end], Span(pos, end, line, col))
                col += end - pos
                pos = end

    @staticmethod
    def _scan_string(source: str, start: int) -> Optional[int]:
        """Find the end of the string literal opening at ``start``.

        Returns:
            Offset one past the closing quote, or None if the input ends first
        """
        length = len(source)
        end = start + 1
        while end < length and source[end] != '"':
            if source[end] == "\\":
                end += 1
            end += 1
        if end >= length:
            return None
        return end + 1


def tokenize_source(source: str, lenient_strings: bool = False) -> List[Token]:
    """Convenience function to tokenize source text.

    Args:
        source: S-expression source string
        lenient_strings: Pass unterminated string literals through

    Returns:
        List of Token objects
    """
    return Lexer(lenient_strings=lenient_strings).tokenize(source)


if __name__ == "__main__":
    sample = '''
; greet someone
(lambda (x) (concat "Hello" x))
[define pi 3.14159]
'''
    for token in tokenize_source(sample):
        print(f"  {token}")
