from __future__ import annotations
import sys


class Symbol(str):
    """A bare identifier atom.

    Symbols are str instances so that `Symbol("velocity") == "velocity"` and
    they can key plain dicts. The subclass only marks them as names to be
    resolved at evaluation time, as opposed to quoted string literals, which
    the parser emits as plain str and which always evaluate to themselves.
    """

    __slots__ = ()

    def __new__(cls, name: str) -> Symbol:
        # Intern to ensure fast equality/hash and reduce memory
        return super().__new__(cls, sys.intern(str(name)))

    @property
    def id(self) -> str:
        return str.__str__(self)

    @property
    def is_input(self) -> bool:
        return self.startswith("$")

    def __repr__(self):
        return f"Symbol({self.id!r})"
