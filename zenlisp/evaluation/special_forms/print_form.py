from zenlisp import EvaluatorFn
from zenlisp import Expression, Value
from zenlisp.printer import format_value
from zenlisp.types.environment import Environment


def print_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(print a b ...): write the values on one line to env.output, return the last."""
    values = [evaluate_fn(e, env) for e in tail]
    print(*(format_value(v) for v in values), file=env.output)
    return values[-1] if values else None
