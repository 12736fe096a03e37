"""
  Rule parser

Builds a homogeneous AST from the token list:

    - list expressions -> tuple of nodes
    - leaves           -> Token whose value has been cast:
        num      -> int, or float when the text has a decimal point
        datetime -> datetime.datetime (naive values are taken as UTC)
        others   -> str

The parser is lenient about parentheses. An unmatched ')' closes the
innermost open list and an unclosed '(' ends at end of input; neither raises.
Lists nested deeper than MAX_DEPTH raise TenetSyntaxError.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from tenet import SExpression
from tenet.errors import TenetSyntaxError
from tenet.reader.lexer import lex
from tenet.types.token import Token, TokenKind

logger = logging.getLogger(__name__)

# Deepest list nesting accepted by parse.
MAX_DEPTH = 128


def cast(token: Token) -> Token:
    """Return `token` with its raw text converted to a typed value."""
    match token.kind:
        case TokenKind.NUM:
            raw = token.value
            return token.with_value(float(raw) if "." in raw else int(raw))
        case TokenKind.DATETIME:
            return token.with_value(parse_datetime(token.value))
        case _:
            return token


def parse_datetime(text: str) -> datetime:
    try:
        value = datetime.fromisoformat(text.strip())
    except ValueError as e:
        raise TenetSyntaxError(f"Invalid date-time literal: {text!r}") from e
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def parse(tokens: list[Token], max_depth: int = MAX_DEPTH) -> SExpression:
    """Consume tokens from the front of `tokens` and return one expression.

    A leading '(' yields the tuple of that list's elements; any other leading
    token yields a one-element tuple holding the cast leaf. Lists nested more
    than `max_depth` deep raise TenetSyntaxError.
    """
    if not tokens:
        return ()
    t = tokens[0]
    pos = 1
    if t.kind is TokenKind.LPAR:
        # open lists, innermost last
        stack: list[list[SExpression]] = [[]]
        expr: SExpression = ()
        n = len(tokens)
        while stack and pos < n:
            t = tokens[pos]
            pos += 1
            if t.kind is TokenKind.LPAR:
                if len(stack) >= max_depth:
                    raise TenetSyntaxError(f"Lists nested deeper than {max_depth} levels")
                stack.append([])
            elif t.kind is TokenKind.RPAR:
                done = tuple(stack.pop())
                if stack:
                    stack[-1].append(done)
                else:
                    expr = done
            else:
                stack[-1].append(cast(t))
        # unclosed lists end at end of input
        while stack:
            done = tuple(stack.pop())
            if stack:
                stack[-1].append(done)
            else:
                expr = done
    elif t.kind is TokenKind.RPAR:
        expr = ()
    else:
        expr = (cast(t),)
    del tokens[:pos]
    return expr


def read(source: Optional[str]) -> SExpression:
    """Lex and parse `source` into the AST of its first expression."""
    tokens = lex(source)
    count = len(tokens)
    ast = parse(tokens)
    if tokens:
        logger.debug("Ignoring %d trailing token(s) after the first expression", len(tokens))
    logger.debug("Read %d token(s) from rule source", count)
    return ast
