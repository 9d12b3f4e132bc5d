"""
Expression tree module for sreader.

This module defines the node types produced by the parser and consumed by
the printer and the structured dump.
"""

from .nodes import (
    Number,
    Symbol,
    StringLiteral,
    ListExpr,
    Expr,
)

__all__ = [
    "Number",
    "Symbol",
    "StringLiteral",
    "ListExpr",
    "Expr",
]
