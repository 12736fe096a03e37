class TenetError(Exception):
    """ Base class for all Tenet errors"""
    pass


class TenetParserError(TenetError):
    """ Base class for errors raised while reading or resolving rule text"""
    pass


class TenetInvalidToken(TenetParserError):
    """ Raised when no token rule matches at the current position"""

    def __init__(self, remaining: str):
        super().__init__(f"Invalid token at: {remaining}")
        self.remaining = remaining


class TenetSyntaxError(TenetParserError):
    """ Raised when a literal or program is structurally invalid"""


class TenetUndefinedVar(TenetParserError):
    """ Raised when an identifier is not bound in any frame"""

    def __init__(self, name: str):
        super().__init__(f"Var '{name}' is undefined!")
        self.name = name


class TenetOpsThreshold(TenetError):
    """ Raised when evaluation exceeds the configured operations ceiling"""

    def __init__(self, max_ops: int):
        super().__init__(f"Exceeded max ops({max_ops}) allowed!")
        self.max_ops = max_ops


class TenetArgumentError(TenetError):
    """ Raised when the number or shape of arguments passed to a macro or builtin is incorrect"""


class TenetTypeError(TenetError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""
