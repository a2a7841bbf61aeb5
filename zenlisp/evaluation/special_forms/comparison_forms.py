import operator

from zenlisp import EvaluatorFn
from zenlisp import Expression, Value
from zenlisp.errors import ZenArityError
from zenlisp.evaluation.coercion import to_number, is_equal
from zenlisp.types.environment import Environment


def _binary(name: str, tail: list[Expression]) -> None:
    if len(tail) != 2:
        raise ZenArityError(f"{name} requires exactly 2 arguments")


def _numeric_comparison(name: str, op):
    def form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
        _binary(name, tail)
        a = to_number(evaluate_fn(tail[0], env), name)
        b = to_number(evaluate_fn(tail[1], env), name)
        return op(a, b)

    form.__name__ = f"compare_{op.__name__}"
    form.__doc__ = f"({name} a b): numeric comparison of exactly two operands."
    return form


gt_form = _numeric_comparison(">", operator.gt)
lt_form = _numeric_comparison("<", operator.lt)
gte_form = _numeric_comparison(">=", operator.ge)
lte_form = _numeric_comparison("<=", operator.le)


def equals_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(== a b): structural equality of the evaluated operands."""
    _binary("==", tail)
    return is_equal(evaluate_fn(tail[0], env), evaluate_fn(tail[1], env))


def not_equals_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    _binary("!=", tail)
    return not is_equal(evaluate_fn(tail[0], env), evaluate_fn(tail[1], env))
