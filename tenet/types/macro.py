from __future__ import annotations

from typing import Callable

from tenet import SExpression, LispValue


class Macro:
    """A callable receiving the evaluator and *unevaluated* argument nodes.

    The transformer returns a single node which the evaluator then evaluates,
    so a macro controls which of its operands are ever evaluated.
    """

    __slots__ = ("transformer", "name")

    def __init__(self, transformer: Callable[..., SExpression], name: str | None = None):
        self.transformer = transformer
        self.name = name or getattr(transformer, "__name__", "macro")

    def __call__(self, evaluator, *args: SExpression) -> SExpression:
        return self.transformer(evaluator, *args)

    def __repr__(self) -> str:
        return f"<Macro {self.name}>"


def is_truthy(val: LispValue) -> bool:
    # Only nil and false are falsey; 0 and "" are true.
    return not (val is None or val is False)
