from zenlisp.types.symbol import Symbol
from zenlisp.types.nodes import ObjectLiteral, FunctionDefinition
from zenlisp.types.environment import Environment
from zenlisp.types.user_function import UserFunction

__all__ = ["Symbol", "ObjectLiteral", "FunctionDefinition", "Environment", "UserFunction"]
