"""
  zenlisp parser

Recursive descent over the token list produced by `tokenize`, emitting plain
Python values wherever one fits:

    - lists              -> Python list
    - {... base k v}     -> ObjectLiteral(spread, {k: v})
    - (defun (f a) body) -> FunctionDefinition([f, a], body)
    - true/false/null    -> True/False/None
    - numbers            -> int/float
    - "text"             -> str (quotes stripped)
    - anything else      -> Symbol
"""

from __future__ import annotations

import re
from collections import deque
from typing import Iterable, Iterator, Optional

from zenlisp import Expression
from zenlisp.errors import (
    ZenInvalidFunctionDefinition,
    ZenInvalidObjectKey,
    ZenUnexpectedClosingBracket,
    ZenUnexpectedEOF,
)
from zenlisp.reader.lexer import STRING_QUOTE, tokenize
from zenlisp.types.nodes import FunctionDefinition, ObjectLiteral
from zenlisp.types.symbol import Symbol

NUMBER_RE = re.compile(r"-?[0-9]+(\.[0-9]+)?")

SPREAD = "..."
DEFUN = "defun"

KEYWORD_ATOMS: dict[str, Expression] = {
    "true": True,
    "false": False,
    "null": None,
}


def parse_number(token: str) -> Optional[int | float]:
    """Return the number spelled by `token`, or None if it is not numeric."""
    m = NUMBER_RE.fullmatch(token)
    if not m:
        return None
    return float(token) if m.group(1) else int(token)


def parse_atom(token: str) -> Expression:
    if token in KEYWORD_ATOMS:
        return KEYWORD_ATOMS[token]
    number = parse_number(token)
    if number is not None:
        return number
    if len(token) >= 2 and token.startswith(STRING_QUOTE) and token.endswith(STRING_QUOTE):
        return token[1:-1]
    return Symbol(token)


class TokenStream:
    def __init__(self, tokens: Iterable[str]):
        self.tokens: deque[str] = deque(tokens)

    def peek(self) -> Optional[str]:
        return self.tokens[0] if self.tokens else None

    def advance(self) -> Optional[str]:
        return self.tokens.popleft() if self.tokens else None

    def at_end(self) -> bool:
        return not self.tokens

    def parse_expr(self) -> Expression:
        token = self.advance()
        if token is None:
            raise ZenUnexpectedEOF("Unexpected end of input")
        if token == "(":
            return self.parse_list()
        if token == "{":
            return self.parse_object()
        if token in (")", "}"):
            raise ZenUnexpectedClosingBracket(f"Unexpected closing bracket '{token}'")
        return parse_atom(token)

    def parse_list(self) -> Expression:
        items: list[Expression] = []
        while self.peek() != ")":
            if self.at_end():
                raise ZenUnexpectedEOF("Unexpected end of input: missing closing parenthesis")
            items.append(self.parse_expr())
        self.advance()  # consume ')'
        if items and isinstance(items[0], Symbol) and items[0] == DEFUN:
            return make_function_definition(items)
        return items

    def parse_object(self) -> ObjectLiteral:
        obj = ObjectLiteral()
        if self.peek() == "}":
            self.advance()
            return obj

        if self.peek() == SPREAD:
            self.advance()
            obj.spread = self.parse_expr()

        while self.peek() != "}":
            if self.at_end():
                raise ZenUnexpectedEOF("Unexpected end of input: missing closing brace")
            key = self.parse_expr()
            if not isinstance(key, str):
                raise ZenInvalidObjectKey(f"Object key must be a string, got {key!r}")
            obj.properties[str(key)] = self.parse_expr()
        self.advance()  # consume '}'
        return obj

    def parse_all(self) -> Iterator[Expression]:
        while not self.at_end():
            yield self.parse_expr()


def make_function_definition(items: list[Expression]) -> FunctionDefinition:
    """Classify `(defun (name p1 p2 ...) body)`."""
    if len(items) != 3:
        raise ZenInvalidFunctionDefinition(
            "defun requires a signature and exactly one body: (defun (name params...) body)"
        )
    _, signature, body = items
    if not isinstance(signature, list) or not signature:
        raise ZenInvalidFunctionDefinition("defun signature must be a list (name params...)")
    for name in signature:
        if not isinstance(name, Symbol):
            raise ZenInvalidFunctionDefinition(
                f"defun names and parameters must be symbols, got {name!r}"
            )
    return FunctionDefinition([str(p) for p in signature], body)


def parse(source: str) -> list[Expression]:
    """Parse `source` into its ordered list of top-level expressions."""
    return list(TokenStream(tokenize(source)).parse_all())
