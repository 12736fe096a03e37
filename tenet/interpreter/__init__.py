from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from tenet import SExpression, LispValue
from tenet.builtin import DEFAULT_VARS
from tenet.config import get_default_max_ops
from tenet.evaluation.evaluator import Evaluator
from tenet.reader.parser import read
from tenet.types.environment import Environment

logger = logging.getLogger(__name__)

_UNSET: Any = object()


def _stringify_keys(vars: Optional[Mapping[Any, LispValue]]) -> dict[str, LispValue]:
    if not vars:
        return {}
    return {str(k): v for k, v in vars.items()}


class CompiledRule:
    """
    A rule that has been lexed and parsed once.

    Calling it evaluates the cached AST against a fresh single-frame
    Environment: the interpreter's bindings overlaid with the call's vars.
    """

    __slots__ = ("interpreter", "source", "ast")

    def __init__(self, interpreter: Interpreter, source: Optional[str], ast: SExpression):
        self.interpreter = interpreter
        self.source = source
        self.ast = ast

    def __call__(self, vars: Optional[Mapping[Any, LispValue]] = None) -> LispValue:
        frame = {**self.interpreter.vars, **_stringify_keys(vars)}
        evaluator = Evaluator(Environment([frame]), self.interpreter.max_ops)
        return evaluator.eval(self.ast)

    def __repr__(self) -> str:
        return f"<CompiledRule {self.source!r}>"


class Interpreter:
    """
    Compiles and runs Tenet rules.

    `vars` are merged over the library defaults (same-name entries replace
    them) and are visible to every rule this interpreter compiles. `max_ops`
    bounds the number of evaluation steps per call; when omitted it is taken
    from the TENET_MAX_OPS environment variable, if set.
    """

    def __init__(self, vars: Optional[Mapping[Any, LispValue]] = None, max_ops: Optional[int] = _UNSET):
        self.max_ops: Optional[int] = get_default_max_ops() if max_ops is _UNSET else max_ops
        self.vars: dict[str, LispValue] = {**DEFAULT_VARS, **_stringify_keys(vars)}

    def compile(self, source: Optional[str]) -> CompiledRule:
        """Lex and parse `source` once; the result can be called repeatedly."""
        ast = read(source)
        logger.debug("Compiled rule %r", source)
        return CompiledRule(self, source, ast)

    def run(self, source: Optional[str], vars: Optional[Mapping[Any, LispValue]] = None) -> LispValue:
        return self.compile(source)(vars)


def compile(source: Optional[str]) -> CompiledRule:
    return Interpreter().compile(source)


def run(source: Optional[str], vars: Optional[Mapping[Any, LispValue]] = None) -> LispValue:
    return Interpreter().run(source, vars)
