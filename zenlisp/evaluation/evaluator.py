"""Core tree-walking evaluator for zenlisp.

A list in call position resolves its operator in a fixed order:

1. property access: `(velocity $1)` reads the `velocity` field of `$1` when
   `velocity` is not a bound name and `$1` holds an object with that key;
2. a callable bound in the environment (user function or host callable);
3. the builtin keyword table in `special_forms`;
4. otherwise ZenUnknownFunction.
"""

from __future__ import annotations

from typing import Iterable

from zenlisp import Expression, Value
from zenlisp.errors import ZenInvalidSpread, ZenTypeError, ZenUnknownFunction, ZenUnknownInput
from zenlisp.evaluation.special_forms import SPECIAL_FORMS
from zenlisp.types.environment import Environment
from zenlisp.types.nodes import FunctionDefinition, ObjectLiteral
from zenlisp.types.symbol import Symbol
from zenlisp.types.user_function import UserFunction

# (not x) is never a field read
NO_PROPERTY_ACCESS = frozenset({"not"})


class Evaluated:
    """An operand that has already been evaluated; evaluates to its value."""

    __slots__ = ("value",)

    def __init__(self, value: Value):
        self.value = value


def evaluate(expressions: Iterable[Expression], env: Environment) -> Value:
    """Evaluate top-level expressions in order; return the last value (or None)."""
    result: Value = None
    for expr in expressions:
        result = evaluate_expression(expr, env)
    return result


def evaluate_expression(expr: Expression, env: Environment) -> Value:
    if isinstance(expr, list):
        return evaluate_list(expr, env)
    if isinstance(expr, ObjectLiteral):
        return evaluate_object(expr, env)
    if isinstance(expr, FunctionDefinition):
        return define_function(expr, env)
    if isinstance(expr, Evaluated):
        return expr.value
    return evaluate_atom(expr, env)


def is_callable(value: Value) -> bool:
    return isinstance(value, UserFunction) or callable(value)


def apply(fn: Value, args: list[Value]) -> Value:
    """Apply a user function or a host Python callable to evaluated arguments."""
    if isinstance(fn, UserFunction):
        return evaluate_expression(fn.body, fn.extend_env(args))
    if callable(fn):
        return fn(*args)
    raise ZenTypeError(f"Cannot apply non-function {fn!r}")


def evaluate_list(expr: list[Expression], env: Environment) -> Value:
    if not expr:
        return None

    head, *tail = expr
    if not isinstance(head, str):
        raise ZenTypeError(f"Invalid function call: {head!r}")

    if len(tail) == 1 and head not in NO_PROPERTY_ACCESS and head not in env:
        target = evaluate_expression(tail[0], env)
        if isinstance(target, dict) and head in target:
            return target[head]
        # not a field read; the operand is not evaluated a second time
        tail = [Evaluated(target)]

    # evaluating the operand may have bound `head` (e.g. a nested defun)
    if head in env:
        fn = env.lookup(head)
        if is_callable(fn):
            args = []
            for arg in tail:
                args.append(evaluate_expression(arg, env))
            return apply(fn, args)

    form = SPECIAL_FORMS.get(head)
    if form is not None:
        return form(tail, env, evaluate_expression)

    raise ZenUnknownFunction(f"Unknown function or property: {head}")


def evaluate_object(obj: ObjectLiteral, env: Environment) -> Value:
    result: dict[str, Value] = {}
    if obj.has_spread:
        base = evaluate_expression(obj.spread, env)
        if not isinstance(base, dict):
            raise ZenInvalidSpread(f"Spread value must be an object, got {base!r}")
        result.update(base)
    for key, value_expr in obj.properties.items():
        result[key] = evaluate_expression(value_expr, env)
    return result


def define_function(definition: FunctionDefinition, env: Environment) -> Value:
    """Bind a closure under the function's own name; a definition has no value."""
    env.define(
        definition.name,
        UserFunction(definition.name, definition.parameters, definition.body, env),
    )
    return None


def evaluate_atom(atom: Expression, env: Environment) -> Value:
    if isinstance(atom, Symbol):
        if atom in env:
            return env.lookup(atom)
        if atom.is_input:
            raise ZenUnknownInput(f"Unknown input: {atom}")
        return str(atom)
    # numbers, booleans, null and string literals evaluate to themselves
    return atom
