from __future__ import annotations
import sys
from contextlib import contextmanager
from typing import Iterator, Literal, Mapping, Optional, TextIO

from zenlisp import Value
from zenlisp.config import get_recursion_limit
from zenlisp.reader.parser import parse
from zenlisp.evaluation.evaluator import evaluate
from zenlisp.types.environment import Environment


@contextmanager
def raised_recursion_limit(limit: int) -> Iterator[None]:
    """Raise Python's recursion limit to at least `limit` for the block."""
    previous = sys.getrecursionlimit()
    if limit > previous:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        if limit > previous:
            sys.setrecursionlimit(previous)


class Interpreter:
    """
    A session for zenlisp expressions.
    Keeps one Environment alive across eval() calls, so definitions and
    `set` bindings made by earlier code stay visible to later code.

    No prelude is loaded unless asked for: prelude functions are bound names,
    and bound names take precedence over field access such as (max $1).

    Evaluation is recursive; `recursion_limit` (default: ZENLISP_RECURSION_LIMIT)
    bounds how deeply user functions may nest before RecursionError.
    """

    def __init__(
        self,
        prelude: str | None | Literal['auto'] = None,
        *,
        output: Optional[TextIO] = None,
        inputs: Optional[Mapping[str, Value]] = None,
        recursion_limit: Optional[int] = None,
    ):
        if inputs is not None:
            self.env: Environment = Environment.from_inputs(inputs, output=output)
        else:
            self.env = Environment(output=output)
        self.recursion_limit: int = (
            recursion_limit if recursion_limit is not None else get_recursion_limit()
        )

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            # Lazy import keeps config reads out of module import time
            from zenlisp.modules.prelude_loader import load_prelude
            load_prelude(self)
        elif prelude:
            self.eval_prelude(prelude)

    def bind_inputs(self, inputs: Mapping[str, Value]) -> None:
        """(Re)bind `$name` input references for the next evaluations."""
        self.env.update(Environment.from_inputs(inputs).vars)

    def eval_prelude(self, code: str) -> None:
        with raised_recursion_limit(self.recursion_limit):
            evaluate(parse(code), self.env)

    def eval(self, code: str) -> Value:
        """Parse and evaluate `code`; return the value of its last expression."""
        with raised_recursion_limit(self.recursion_limit):
            return evaluate(parse(code), self.env)
