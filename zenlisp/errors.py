
class ZenError(Exception):
    """ Base class for all zenlisp errors"""
    pass

# -------------------------------
# Parse errors
# -------------------------------
class ZenSyntaxError(ZenError):
    """ Raised when the source text cannot be parsed"""

class ZenUnexpectedEOF(ZenSyntaxError):
    """ Raised when input ends before a list, object or string is closed"""

class ZenUnexpectedClosingBracket(ZenSyntaxError):
    """ Raised when ')' or '}' appears where an expression is expected"""

class ZenInvalidObjectKey(ZenSyntaxError):
    """ Raised when an object literal key is not a string atom"""

class ZenInvalidFunctionDefinition(ZenSyntaxError):
    """ Raised when a defun form is malformed"""

# -------------------------------
# Name resolution errors
# -------------------------------
class ZenNameError(ZenError):
    """ Raised when a name cannot be resolved"""

class ZenUnknownFunction(ZenNameError):
    """ Raised when an operator matches no binding, property or builtin"""

class ZenUnknownInput(ZenNameError):
    """ Raised when a $-prefixed input reference has no binding"""

class ZenUnboundSymbol(ZenNameError):
    """ Raised when a symbol is looked up before it is bound"""

# -------------------------------
# Evaluation errors
# -------------------------------
class ZenArityError(ZenError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class ZenTypeError(ZenError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class ZenInvalidSpread(ZenTypeError):
    """ Raised when an object spread does not evaluate to an object"""

class ZenInvalidSymbol(ZenTypeError):
    """ Raised when a name is required but something else was given"""

class ZenZeroDivisionError(ZenError):
    """ Raised on division or modulo by zero"""
