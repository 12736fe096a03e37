from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class TokenKind(Enum):
    LPAR = "lpar"
    RPAR = "rpar"
    FN = "fn"
    VAR = "var"
    NUM = "num"
    DATETIME = "datetime"
    SPC = "spc"
    STR = "str"


@dataclass(frozen=True, slots=True)
class Token:
    """A lexed token. `value` holds the raw text until the parser casts it."""

    kind: TokenKind
    value: Any

    def with_value(self, value: Any) -> Token:
        return Token(self.kind, value)

    def __repr__(self) -> str:
        return f"Token({self.kind.value}, {self.value!r})"


def qvar(val: Any) -> Token:
    """Quote a Python value as a Tenet identifier reference."""
    return Token(TokenKind.VAR, str(val))
