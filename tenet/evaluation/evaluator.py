"""Tree-walking evaluator for Tenet rules.

An Evaluator is created per top-level call. It owns the call's Environment
and the operation counter, so nothing mutable is shared between concurrent
calls on the same Interpreter. Macros receive the Evaluator itself and call
`eval` on the operands they choose to evaluate, which keeps every nested
evaluation on the same counter.
"""

from __future__ import annotations

import logging
from typing import Optional

from tenet import SExpression, LispValue
from tenet.errors import TenetOpsThreshold
from tenet.types.environment import Environment
from tenet.types.macro import Macro
from tenet.types.token import Token, TokenKind

logger = logging.getLogger(__name__)


class Evaluator:
    """Evaluates AST nodes against one Environment under an optional ops ceiling."""

    __slots__ = ("env", "max_ops", "ops")

    def __init__(self, env: Environment, max_ops: Optional[int] = None):
        self.env = env
        self.max_ops = max_ops
        self.ops = 0

    def _tick(self) -> None:
        self.ops += 1
        if self.max_ops is not None and self.ops > self.max_ops:
            logger.warning("Rule evaluation exceeded max ops (%d)", self.max_ops)
            raise TenetOpsThreshold(self.max_ops)

    def eval(self, expr: SExpression) -> LispValue:
        """Evaluate one node. Every call counts as one operation."""
        self._tick()

        match expr:
            case Token(kind=TokenKind.VAR, value=name):
                return self.env.resolve(name)
            case Token(value=value):
                return value
            case ():
                return None
            case (head_expr, *tail):
                head = self.eval(head_expr)
                if isinstance(head, Macro):
                    expanded = head(self, *tail)
                    return self.eval(expanded)
                args = [self.eval(arg) for arg in tail]
                if callable(head):
                    return head(*args)
                # A non-callable head discards its (already evaluated) arguments.
                return head

        # Host values that are neither tokens nor lists are self-evaluating.
        return expr


def evaluate(expr: SExpression, env: Environment, max_ops: Optional[int] = None) -> LispValue:
    """Evaluate `expr` with a fresh operation counter."""
    return Evaluator(env, max_ops).eval(expr)
