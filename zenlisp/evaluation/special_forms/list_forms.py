from zenlisp import EvaluatorFn
from zenlisp import Expression, Value
from zenlisp.errors import ZenArityError, ZenTypeError
from zenlisp.types.environment import Environment


def _single_list(name: str, tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> list:
    if len(tail) != 1:
        raise ZenArityError(f"{name} requires exactly 1 argument")
    value = evaluate_fn(tail[0], env)
    if not isinstance(value, list):
        raise ZenTypeError(f"{name} requires a list argument, got {value!r}")
    return value


def list_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    return [evaluate_fn(e, env) for e in tail]


def car_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(car xs): first element, or null for an empty list."""
    items = _single_list("car", tail, env, evaluate_fn)
    return items[0] if items else None


def cdr_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(cdr xs): every element but the first."""
    return _single_list("cdr", tail, env, evaluate_fn)[1:]


def concat_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(concat a b ...): splice list operands, append scalar ones."""
    result: list[Value] = []
    for e in tail:
        value = evaluate_fn(e, env)
        if isinstance(value, list):
            result.extend(value)
        else:
            result.append(value)
    return result


def length_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    if len(tail) != 1:
        raise ZenArityError("length requires exactly 1 argument")
    value = evaluate_fn(tail[0], env)
    if isinstance(value, (str, list)):
        return len(value)
    raise ZenTypeError(f"length requires a string or list argument, got {value!r}")
