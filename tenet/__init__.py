# Core type aliases for Tenet's data model.
# Rules are represented with plain Python values: list expressions are tuples,
# leaves are Token instances, and runtime values are ordinary Python objects
# (None, bool, int, float, datetime, str, list, callables, Macro).
#
# Naming guidance:
# - SExpression: Use in reader/parser/macro code to denote syntactic forms (AST nodes).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

import logging
from typing import Any

# Runtime value alias
LispValue = Any
# AST node alias: a Token leaf or a tuple of nodes
SExpression = Any

from tenet.errors import (  # noqa: E402
    TenetError,
    TenetParserError,
    TenetInvalidToken,
    TenetSyntaxError,
    TenetUndefinedVar,
    TenetOpsThreshold,
    TenetArgumentError,
    TenetTypeError,
)
from tenet.types.token import Token, TokenKind, qvar  # noqa: E402
from tenet.types.macro import Macro  # noqa: E402
from tenet.interpreter import Interpreter, CompiledRule, compile, run  # noqa: E402

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LispValue",
    "SExpression",
    "TenetError",
    "TenetParserError",
    "TenetInvalidToken",
    "TenetSyntaxError",
    "TenetUndefinedVar",
    "TenetOpsThreshold",
    "TenetArgumentError",
    "TenetTypeError",
    "Token",
    "TokenKind",
    "qvar",
    "Macro",
    "Interpreter",
    "CompiledRule",
    "compile",
    "run",
]
