from zenlisp.reader.lexer import tokenize
from zenlisp.reader.parser import TokenStream, parse

__all__ = ["tokenize", "TokenStream", "parse"]
