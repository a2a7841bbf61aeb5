"""Text renderings of expressions and values.

`to_source` writes an expression back in zenlisp syntax, so that
`parse(to_source(expr))[0] == expr` for anything the parser produces.
`format_value` renders a runtime value for display (the `print` form):
strings bare, objects and lists as indented JSON.
"""

import json
import math
from decimal import Decimal

from zenlisp import Expression, Value
from zenlisp.reader.parser import NUMBER_RE, SPREAD
from zenlisp.types.nodes import FunctionDefinition, ObjectLiteral
from zenlisp.types.symbol import Symbol
from zenlisp.types.user_function import UserFunction


def _number_source(n) -> str:
    text = repr(n)
    if NUMBER_RE.fullmatch(text) or not math.isfinite(n):
        return text
    # exponent notation is not part of the grammar; expand the shortest
    # repr exactly so no digits are lost
    text = format(Decimal(text), "f")
    return text if "." in text else text + ".0"


def to_source(expr: Expression) -> str:
    if expr is None:
        return "null"
    if expr is True:
        return "true"
    if expr is False:
        return "false"
    if isinstance(expr, Symbol):
        return expr.id
    if isinstance(expr, str):
        return f'"{expr}"'
    if isinstance(expr, (int, float)):
        return _number_source(expr)
    if isinstance(expr, list):
        return f"({' '.join(to_source(e) for e in expr)})"
    if isinstance(expr, ObjectLiteral):
        parts = []
        if expr.has_spread:
            parts += [SPREAD, to_source(expr.spread)]
        for key, value in expr.properties.items():
            parts += [key, to_source(value)]
        return f"{{{' '.join(parts)}}}"
    if isinstance(expr, FunctionDefinition):
        return f"(defun ({' '.join(expr.params)}) {to_source(expr.body)})"
    raise TypeError(f"Cannot render {expr!r} as source")


def _callable_text(value: Value) -> str:
    if isinstance(value, UserFunction):
        return str(value)
    return f"<callable {getattr(value, '__name__', '?')}>"


def _jsonable(value: Value):
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    if isinstance(value, UserFunction) or callable(value):
        return _callable_text(value)
    return value


def format_value(value: Value) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return str(value)
    if isinstance(value, (dict, list)):
        return json.dumps(_jsonable(value), indent=2)
    if isinstance(value, UserFunction) or callable(value):
        return _callable_text(value)
    return repr(value)
