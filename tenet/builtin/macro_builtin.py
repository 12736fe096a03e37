"""Builtin macros for Tenet.

Each macro receives the evaluator and its operands unevaluated, evaluates
only what it needs, and returns the node the evaluator should evaluate next.
"""

from __future__ import annotations

from typing import Any

from tenet import SExpression
from tenet.errors import TenetArgumentError
from tenet.types.macro import Macro, is_truthy
from tenet.types.token import qvar


def if_macro(evaluator, *args: SExpression) -> SExpression:
    """(if pred then [else]): only the selected branch is ever evaluated.

    A missing else branch selects nil.
    """
    if len(args) not in (2, 3):
        raise TenetArgumentError("If requires a predicate, a then-clause and an optional else-clause")
    pred, then_clause = args[0], args[1]
    else_clause = args[2] if len(args) == 3 else qvar('nil')
    return then_clause if is_truthy(evaluator.eval(pred)) else else_clause


def cond_macro(evaluator, *args: SExpression) -> SExpression:
    """
    (cond pred1 expr1 pred2 expr2 ... [default])

    Predicates are tested left to right in pairs and the expression paired
    with the first true one is returned. With an odd number of arguments the
    last one is the default; otherwise nothing matching yields nil.
    """
    if len(args) < 3:
        raise TenetArgumentError("Cond requires at least 3 args")
    default = args[-1] if len(args) % 2 else qvar('nil')
    for pred, expr in zip(args[::2], args[1::2]):
        if is_truthy(evaluator.eval(pred)):
            return expr
    return default


def and_macro(evaluator, *args: SExpression) -> SExpression:
    """Short-circuiting AND: false on the first falsey operand, else the last operand."""
    for arg in args:
        if not is_truthy(evaluator.eval(arg)):
            return qvar('false')
    return args[-1] if args else qvar('true')


def or_macro(evaluator, *args: SExpression) -> SExpression:
    """Short-circuiting OR: the first truthy operand, else false."""
    for arg in args:
        if is_truthy(evaluator.eval(arg)):
            return arg
    return qvar('false')


def register(table: dict[str, Any]) -> None:
    """Register builtin macros in the provided table."""
    table.update({
        'if': Macro(if_macro, 'if'),
        'cond': Macro(cond_macro, 'cond'),
        'and': Macro(and_macro, 'and'),
        'or': Macro(or_macro, 'or'),
    })
