"""Runtime environment for zenlisp.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. A function call gets a fresh child scope
holding only its parameters; lookups read through to the scope the function
was defined in, writes never leave the innermost scope.
"""

from __future__ import annotations

import sys
from io import StringIO
from typing import Mapping, Optional, TextIO

from zenlisp import Value
from zenlisp.errors import ZenInvalidSymbol, ZenUnboundSymbol


class Environment:
    """Hierarchical mapping from names to values."""

    __slots__ = ("vars", "outer", "_output")

    def __init__(
        self,
        bindings: Optional[Mapping[str, Value]] = None,
        outer: Optional[Environment] = None,
        output: Optional[TextIO] = None,
    ):
        self.vars: dict[str, Value] = {}
        self.outer: Environment | None = outer
        self._output: TextIO | None = output
        if bindings:
            self.update(bindings)

    @classmethod
    def from_inputs(
        cls, inputs: Mapping[str, Value], output: Optional[TextIO] = None
    ) -> Environment:
        """Build a root environment exposing `inputs` as `$name` references.

        Keys that already carry the `$` prefix are bound unchanged.
        """
        env = cls(output=output)
        env.update(
            {(k if str(k).startswith("$") else f"${k}"): v for k, v in inputs.items()}
        )
        return env

    @property
    def output(self) -> TextIO:
        """Stream the `print` form writes to; inherited from the outermost scope."""
        env: Optional[Environment] = self
        while env is not None:
            if env._output is not None:
                return env._output
            env = env.outer
        return sys.stdout

    def child(self) -> Environment:
        return Environment(outer=self)

    def define(self, name: str, value: Value) -> None:
        """Bind `name` to `value` in this scope, replacing any previous binding.

        Raises ZenInvalidSymbol if `name` is not a string.
        """
        if not isinstance(name, str):
            raise ZenInvalidSymbol(f"Cannot define {name!r} as a name")
        self.vars[str(name)] = value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> Value:
        """Look up the value bound to `name` along the scope chain.

        Raises ZenUnboundSymbol if not found.
        """
        env = self.find(name)
        if env is None:
            raise ZenUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        return env.vars[name]

    def update(self, mapping: Mapping[str, Value]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")  # indicate parent exists
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
