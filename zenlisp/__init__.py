# Core type aliases for zenlisp's data model.
# Plain Python types (int, float, str, bool, None, list, dict) represent both
# parsed expressions and runtime values. Only the pieces that have no natural
# Python counterpart get their own classes: Symbol, ObjectLiteral and
# FunctionDefinition on the syntax side, UserFunction on the runtime side.
#
# Naming guidance:
# - Expression: use in reader/parser code for parsed forms.
# - Value:      use in evaluator/runtime code for evaluated results.

from typing import Any, Callable

Value = Any
Expression = Any

# Evaluator function type handed to special forms
EvaluatorFn = Callable[..., Value]

from zenlisp.errors import ZenError  # noqa: E402
from zenlisp.reader.parser import parse  # noqa: E402
from zenlisp.types.environment import Environment  # noqa: E402
from zenlisp.evaluation.evaluator import evaluate  # noqa: E402
from zenlisp.interpreter import Interpreter  # noqa: E402

__all__ = [
    "Value",
    "Expression",
    "EvaluatorFn",
    "ZenError",
    "parse",
    "evaluate",
    "Environment",
    "Interpreter",
]
