"""AST node types that have no plain-Python counterpart.

Lists parse to Python lists and atoms to Python primitives (or Symbol); only
object literals and function definitions need their own shape.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from zenlisp import Expression


class NoSpreadType:
    """Marks an object literal without `...`; `{... null}` spreads None."""

    __slots__ = ()

    def __repr__(self):
        return "NO_SPREAD"

    def __bool__(self):
        return False


NO_SPREAD = NoSpreadType()


@dataclass
class ObjectLiteral:
    """`{... base key value ...}`: optional spread plus ordered properties."""

    spread: Expression = NO_SPREAD
    properties: dict[str, Expression] = field(default_factory=dict)

    @property
    def has_spread(self) -> bool:
        return self.spread is not NO_SPREAD


@dataclass
class FunctionDefinition:
    """`(defun (name p1 p2 ...) body)`.

    `params[0]` is the function's own name; the callable's parameters are
    `params[1:]`.
    """

    params: list[str]
    body: Expression

    @property
    def name(self) -> str:
        return self.params[0]

    @property
    def parameters(self) -> list[str]:
        return self.params[1:]
