from zenlisp import EvaluatorFn
from zenlisp import Expression, Value
from zenlisp.errors import ZenArityError, ZenZeroDivisionError
from zenlisp.evaluation.coercion import to_number
from zenlisp.types.environment import Environment


def _numbers(op: str, tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn):
    nums = []
    for e in tail:
        nums.append(to_number(evaluate_fn(e, env), op))
    return nums


def add_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(+ a b ...): numeric sum, 0 with no operands."""
    result = 0
    for x in _numbers("+", tail, env, evaluate_fn):
        result += x
    return result


def sub_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(- a): negation. (- a b ...): subtract the rest from the first."""
    if not tail:
        raise ZenArityError("- requires at least 1 argument")
    nums = _numbers("-", tail, env, evaluate_fn)
    if len(nums) == 1:
        return -nums[0]
    result = nums[0]
    for x in nums[1:]:
        result -= x
    return result


def mul_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(* a b ...): numeric product, 1 with no operands."""
    result = 1
    for x in _numbers("*", tail, env, evaluate_fn):
        result *= x
    return result


def div_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(/ a b ...): divide the first operand by each of the rest, left to right."""
    if not tail:
        raise ZenArityError("/ requires at least 1 argument")
    nums = _numbers("/", tail, env, evaluate_fn)
    result = nums[0]
    for x in nums[1:]:
        if x == 0:
            raise ZenZeroDivisionError("Division by zero")
        result /= x
    return result


def mod_form(tail: list[Expression], env: Environment, evaluate_fn: EvaluatorFn) -> Value:
    """(% n d): remainder carrying the sign of n."""
    if len(tail) != 2:
        raise ZenArityError("Modulo operation requires exactly two arguments")
    n, d = _numbers("%", tail, env, evaluate_fn)
    if d == 0:
        raise ZenZeroDivisionError("Modulo by zero")
    r = abs(n) % abs(d)
    return -r if n < 0 else r
