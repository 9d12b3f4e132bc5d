"""
Reader orchestration module for sreader.

This module provides the high-level Reader class that coordinates
file loading, tokenizing and parsing, and reports the outcome as a
ReadResult instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from ..frontend import Lexer, Parser, ParseError, Token
from ..ir import Expr
from ..utils.settings import Settings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


@dataclass
class ReadResult:
    """Result of a read operation.

    Attributes:
        success: Whether the source parsed
        exprs: Top-level expressions (empty on failure)
        error: The parse error, if one was raised
        error_message: Error message if the read failed
        filename: Name of the source that was read
        source: The text that was parsed
    """
    success: bool
    exprs: List[Expr] = field(default_factory=list)
    error: Optional[ParseError] = None
    error_message: Optional[str] = None
    filename: str = "<input>"
    source: str = ""


class Reader:
    """Main reader class for sreader.

    Example:
        >>> reader = Reader()
        >>> result = reader.read_file(Path("example.sx"))
        >>> if result.success:
        ...     print(len(result.exprs))
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the reader.

        Args:
            settings: Reader settings; defaults to DEFAULT_SETTINGS
        """
        self.settings = settings or DEFAULT_SETTINGS
        self._lexer = Lexer(lenient_strings=self.settings.lenient_strings)
        self._parser = Parser(lenient_strings=self.settings.lenient_strings)

    def tokenize(self, source: str) -> List[Token]:
        """Tokenize source text.

        Raises:
            ParseError: If the lexer rejects the source
        """
        return self._lexer.tokenize(source)

    def parse(self, source: str) -> List[Expr]:
        """Parse source text into top-level expressions.

        Raises:
            ParseError: If the source is malformed
        """
        return self._parser.parse(source)

    def read_source(self, source: str, filename: str = "<input>") -> ReadResult:
        """Parse source text, capturing any parse error in the result.

        Args:
            source: S-expression source string
            filename: Source name for messages

        Returns:
            ReadResult: The outcome of the parse
        """
        logger.debug(f"Parsing {filename} ({len(source)} chars)")
        try:
            exprs = self._parser.parse(source)
        except ParseError as e:
            logger.info(f"{filename}: {e.kind}: {e}")
            return ReadResult(
                success=False,
                error=e,
                error_message=f"{filename}: {e}",
                filename=filename,
                source=source
            )

        logger.debug(f"Parsed {len(exprs)} top-level expression(s) from {filename}")
        return ReadResult(success=True, exprs=exprs, filename=filename, source=source)

    def read_file(self, path: Union[str, Path]) -> ReadResult:
        """Read and parse a source file.

        Args:
            path: Path to the source file

        Returns:
            ReadResult: The outcome of the read
        """
        path = Path(path)
        if not path.exists():
            return ReadResult(
                success=False,
                error_message=f"Input file not found: {path}",
                filename=str(path)
            )

        try:
            source = path.read_text(encoding=self.settings.encoding)
        except (OSError, UnicodeDecodeError) as e:
            return ReadResult(
                success=False,
                error_message=f"Failed to read {path}: {e}",
                filename=str(path)
            )

        return self.read_source(source, filename=str(path))
