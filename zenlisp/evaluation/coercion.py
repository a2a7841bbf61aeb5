"""Value policies shared by the builtin forms: numbers, truthiness, equality."""

from __future__ import annotations

import math

from zenlisp import Value
from zenlisp.errors import ZenTypeError
from zenlisp.reader.parser import parse_number


def is_number(value: Value) -> bool:
    # bool is an int subclass but never a number here
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def to_number(value: Value, op: str = "operator") -> int | float:
    """Numbers pass through, numeric strings convert, anything else is an error."""
    if is_number(value):
        return value
    if isinstance(value, str):
        number = parse_number(value)
        if number is not None:
            return number
    raise ZenTypeError(f"{op} expects numbers, got {value!r}")


def is_truthy(value: Value) -> bool:
    """None, False, 0, NaN and "" are false; everything else is true."""
    if value is None or value is False:
        return False
    if is_number(value):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def is_equal(a: Value, b: Value) -> bool:
    """Structural equality for zenlisp values."""
    if a is b:
        return True
    if is_number(a) and is_number(b):
        return a == b
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, dict) and isinstance(b, dict):
        if a.keys() != b.keys():
            return False
        return all(is_equal(a[k], b[k]) for k in a)
    if isinstance(a, str) and isinstance(b, str):
        return a == b
    if type(a) != type(b):
        return False
    return a == b
