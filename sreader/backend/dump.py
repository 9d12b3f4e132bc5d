"""
Structured dump for sreader.

Converts expression trees, tokens and errors into JSON-compatible data so a
display layer can show them without knowing the node classes.
"""

import json
from typing import Any, Dict, List, Sequence

from ..frontend import ParseError, Token
from ..ir import Number, Symbol, StringLiteral, ListExpr, Expr


def to_data(expr: Expr) -> Dict[str, Any]:
    """Convert an expression into nested dicts and lists."""
    if isinstance(expr, Number):
        return {"type": "number", "value": expr.value}
    elif isinstance(expr, Symbol):
        return {"type": "symbol", "name": expr.name}
    elif isinstance(expr, StringLiteral):
        return {"type": "string", "content": expr.content}
    elif isinstance(expr, ListExpr):
        return {"type": "list", "items": [to_data(item) for item in expr.items]}
    else:
        raise TypeError(f"Unsupported expression type: {type(expr).__name__}")


def token_to_data(token: Token) -> Dict[str, Any]:
    span = token.span
    return {
        "type": token.type.name.lower(),
        "text": token.text,
        "start": span.start_offset,
        "end": span.end_offset,
        "line": span.line,
        "col": span.col,
    }


def error_to_data(error: ParseError) -> Dict[str, Any]:
    """Convert a parse error into the fields an error display needs."""
    return {
        "error": error.kind,
        "message": error.message,
        "line": error.line,
        "col": error.col,
    }


def dump(exprs: Sequence[Expr], indent: int = 2) -> str:
    """Render top-level expressions as JSON text.

    Args:
        exprs: Expressions as returned by the parser
        indent: JSON indentation, or 0 for a single line

    Returns:
        JSON array with one object per top-level expression
    """
    data: List[Dict[str, Any]] = [to_data(expr) for expr in exprs]
    return json.dumps(data, indent=indent or None, ensure_ascii=False)


def dump_tokens(tokens: Sequence[Token], indent: int = 2) -> str:
    """Render a token sequence as JSON text."""
    return json.dumps([token_to_data(t) for t in tokens], indent=indent or None, ensure_ascii=False)
