"""Render tokens or parsed rules back into rule text."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable

from tenet import SExpression
from tenet.types.token import Token, TokenKind


def format_token(token: Token) -> str:
    value = token.value
    match token.kind:
        case TokenKind.LPAR:
            return "("
        case TokenKind.RPAR:
            return ")"
        case TokenKind.STR:
            # Escapes were kept verbatim by the lexer, so quoting is enough.
            return f'"{value}"' if '"' not in value else f"'{value}'"
        case TokenKind.DATETIME:
            text = value.isoformat() if isinstance(value, datetime) else value
            return f"#dt{{{text}}}"
        case _:
            return str(value)


def format_tokens(tokens: Iterable[Token]) -> str:
    """Join tokens with single spaces, without padding inside parentheses."""
    out: list[str] = []
    prev: Token | None = None
    for tok in tokens:
        if prev is not None and prev.kind is not TokenKind.LPAR and tok.kind is not TokenKind.RPAR:
            out.append(" ")
        out.append(format_token(tok))
        prev = tok
    return "".join(out)


def to_source(expr: SExpression) -> str:
    """Render a parsed AST node as canonical rule text."""
    if isinstance(expr, Token):
        return format_token(expr)
    return "(" + " ".join(to_source(e) for e in expr) + ")"
