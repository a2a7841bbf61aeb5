"""
  zenlisp tokenizer

Splits source text into a flat list of string tokens:

    - ( ) { } are always tokens of their own, even mid-word
    - any whitespace separates tokens outside string literals
    - "..." runs are copied verbatim, quote characters included
    - ; starts a comment that runs to the end of the line
"""

from __future__ import annotations

from zenlisp.errors import ZenUnexpectedEOF

BRACKETS = frozenset("(){}")
STRING_QUOTE = '"'
COMMENT = ";"


def tokenize(source: str) -> list[str]:
    tokens: list[str] = []
    current: list[str] = []
    in_string = False
    in_comment = False

    def flush():
        if current:
            tokens.append("".join(current))
            current.clear()

    for char in source:
        if in_comment:
            if char == "\n":
                in_comment = False
            continue

        if char == STRING_QUOTE:
            in_string = not in_string
            current.append(char)
        elif in_string:
            current.append(char)
        elif char in BRACKETS:
            flush()
            tokens.append(char)
        elif char.isspace():
            flush()
        elif char == COMMENT:
            flush()
            in_comment = True
        else:
            current.append(char)

    if in_string:
        raise ZenUnexpectedEOF("Unexpected end of input: unterminated string literal")
    flush()
    return tokens
