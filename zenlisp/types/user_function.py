"""User-defined function representation and argument binding for zenlisp."""

from __future__ import annotations

from io import StringIO

from zenlisp import Expression, Value
from zenlisp.types.environment import Environment
from zenlisp.errors import ZenArityError


class UserFunction:
    """A closure created by `defun`: name, parameters, body and defining env."""

    __slots__ = ("name", "params", "body", "env")

    def __init__(
        self, name: str, params: list[str], body: Expression, env: Environment
    ):
        self.name: str = name
        self.params: list[str] = params
        self.body: Expression = body
        # Captured by reference: definitions made later in `env` stay visible
        self.env: Environment = env

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<function (")
            buffer.write(" ".join(str(p) for p in [self.name, *self.params]))
            buffer.write(")>")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return str(self)

    def extend_env(self, args: list[Value]) -> Environment:
        """
        Bind `args` positionally to the parameters in a new child scope of the
        captured environment. Parameters without an argument are bound to None.
        """
        if len(args) > len(self.params):
            extra = list(args[len(self.params):])
            raise ZenArityError(f"{self.name}: too many arguments: {extra}")
        call_env = Environment(outer=self.env)
        for i, param in enumerate(self.params):
            call_env.define(param, args[i] if i < len(args) else None)
        return call_env
