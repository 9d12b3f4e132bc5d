"""
Expression node definitions for sreader.

This module contains the data classes that make up a parsed expression
tree. Nodes are frozen; a list node holds its children in a tuple, so a
tree cannot be modified once the parser has built it.
"""

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Number:
    """Numeric atom.

    Attributes:
        value: The value as a double precision float
    """
    value: float

    def __post_init__(self):
        if not isinstance(self.value, float):
            object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class Symbol:
    """Bare, unquoted atom.

    Attributes:
        name: The raw atom text
    """
    name: str


@dataclass(frozen=True)
class StringLiteral:
    """Quoted string atom.

    Attributes:
        content: The decoded text, without quotes or escapes
    """
    content: str


@dataclass(frozen=True)
class ListExpr:
    """Parenthesized list of expressions.

    Attributes:
        items: Child expressions in source order (may be empty)
    """
    items: Tuple["Expr", ...] = ()

    def __post_init__(self):
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __getitem__(self, index):
        return self.items[index]


# Union type for all expressions
Expr = Union[
    Number,
    Symbol,
    StringLiteral,
    ListExpr,
]
