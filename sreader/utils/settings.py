"""
Configuration settings for sreader.

This module contains default configuration values and settings used
by the reader façade and the command-line interface.
"""

from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class Settings:
    """Reader settings and configuration.

    Attributes:
        lenient_strings: Pass unterminated string literals on to the decoder
            instead of rejecting them in the lexer
        dump_indent: JSON indentation for structured dumps (0 for one line)
        encoding: Text encoding used when reading source files
        default_emit: Output form used by the CLI when none is given
        emit_choices: Valid output forms for the CLI
    """
    lenient_strings: bool = False
    dump_indent: int = 2
    encoding: str = "utf-8"
    default_emit: str = "dump"
    emit_choices: tuple = ("dump", "source", "tokens")

    @property
    def emit_options(self) -> List[str]:
        """Get the list of valid output forms."""
        return list(self.emit_choices)


# Global default settings instance
DEFAULT_SETTINGS = Settings()
