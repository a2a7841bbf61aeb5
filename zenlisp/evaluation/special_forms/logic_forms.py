from zenlisp import EvaluatorFn
from zenlisp import Expression, Value
from zenlisp.errors import ZenArityError
from zenlisp.evaluation.coercion import is_truthy
from zenlisp.types.environment import Environment


def and_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Short-circuiting logical AND.

    (and a b c ...) evaluates operands left-to-right and stops at the first
    falsy one. Returns True when every operand is truthy (including when
    there are none), False otherwise.
    """
    return all(is_truthy(evaluate_fn(e, env)) for e in tail)


def or_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """Short-circuiting logical OR.

    (or a b c ...) evaluates operands left-to-right and stops at the first
    truthy one. Returns True if one was found, False otherwise.
    """
    return any(is_truthy(evaluate_fn(e, env)) for e in tail)


def not_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    if len(tail) != 1:
        raise ZenArityError("Not operation requires exactly one argument")
    return not is_truthy(evaluate_fn(tail[0], env))
