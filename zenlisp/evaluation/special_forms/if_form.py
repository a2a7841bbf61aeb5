from zenlisp import EvaluatorFn
from zenlisp import Expression, Value
from zenlisp.errors import ZenArityError
from zenlisp.evaluation.coercion import is_truthy
from zenlisp.types.environment import Environment


def if_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    if len(tail) != 3:
        raise ZenArityError("If statement requires exactly three arguments")

    cond = evaluate_fn(tail[0], env)
    if is_truthy(cond):
        return evaluate_fn(tail[1], env)
    return evaluate_fn(tail[2], env)
