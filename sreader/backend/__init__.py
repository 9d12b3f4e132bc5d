"""
Output module for sreader.

This module turns expression trees back into source text or into a
structured dump for display.
"""

from .printer import stringify, stringify_expr, format_number
from .dump import dump, dump_tokens, to_data, token_to_data, error_to_data

__all__ = [
    "stringify",
    "stringify_expr",
    "format_number",
    "dump",
    "dump_tokens",
    "to_data",
    "token_to_data",
    "error_to_data",
]
