"""
Source printer for sreader.

Renders expression trees back to S-expression text. The output parses back
to an equal tree; comments, layout and the original bracket kinds are not
kept.
"""

import json
import math
from typing import Sequence

from ..ir import Number, Symbol, StringLiteral, ListExpr, Expr


# Integral floats up to 2**53 are printed without a fractional part.
_MAX_EXACT_INT = 2 ** 53


def format_number(value: float) -> str:
    """Format a number in canonical decimal form.

    Args:
        value: The number to format

    Returns:
        "42" for integral values, "-0" for negative zero, otherwise the
        shortest text that reads back as the same float
    """
    value = float(value)
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    if value.is_integer() and abs(value) <= _MAX_EXACT_INT:
        return str(int(value))
    return repr(value)


def stringify_expr(expr: Expr) -> str:
    """Render a single expression as source text."""
    if isinstance(expr, Number):
        return format_number(expr.value)
    elif isinstance(expr, StringLiteral):
        return json.dumps(expr.content, ensure_ascii=False)
    elif isinstance(expr, Symbol):
        return expr.name
    elif isinstance(expr, ListExpr):
        return "(" + " ".join(stringify_expr(item) for item in expr.items) + ")"
    else:
        raise TypeError(f"Unsupported expression type: {type(expr).__name__}")


def stringify(exprs: Sequence[Expr]) -> str:
    """Render top-level expressions, one per line.

    Args:
        exprs: Expressions as returned by the parser

    Returns:
        Source text
    """
    return "\n".join(stringify_expr(expr) for expr in exprs)
