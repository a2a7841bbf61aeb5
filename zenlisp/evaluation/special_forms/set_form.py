from zenlisp import EvaluatorFn
from zenlisp import Expression, Value
from zenlisp.errors import ZenInvalidSymbol, ZenArityError
from zenlisp.types.environment import Environment


def set_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(set name value): bind in the current scope and return the value."""
    if len(tail) != 2:
        raise ZenArityError("set requires exactly 2 arguments: (set var value)")
    name, val_expr = tail
    if not isinstance(name, str):
        raise ZenInvalidSymbol(f"set first argument must be a name, got {name!r}")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
