"""
  Rule lexer

Token rules are tried in list order at the current position and the first
rule that matches there wins; there is no longest-match arbitration, so the
order of TOKEN_RULES is significant. Whitespace is consumed but never
emitted. Rules with a capture group emit that group's text, which strips the
delimiters from strings and the `#dt{...}` wrapper from date-time literals.
Backslash escapes inside strings are kept verbatim.
"""

from __future__ import annotations

import re
from typing import NamedTuple, Optional

from tenet.errors import TenetInvalidToken
from tenet.types.token import Token, TokenKind


class TokenRule(NamedTuple):
    kind: TokenKind
    pattern: re.Pattern
    capture: int = 0
    discard: bool = False


_SYMBOL_CHARS = r"A-Za-z_><+!=*/%\-"

TOKEN_RULES: tuple[TokenRule, ...] = (
    TokenRule(TokenKind.LPAR, re.compile(r"\(")),
    TokenRule(TokenKind.RPAR, re.compile(r"\)")),
    TokenRule(TokenKind.FN, re.compile(rf"fn(?![{_SYMBOL_CHARS}])")),
    # A '-' directly followed by a digit is left for the number rule.
    TokenRule(TokenKind.VAR, re.compile(rf"(?!-[0-9])[{_SYMBOL_CHARS}]+")),
    TokenRule(TokenKind.NUM, re.compile(r"(-?[0-9]+(\.[0-9]+)?)")),
    TokenRule(TokenKind.DATETIME, re.compile(r"#dt\{([^{}]+)\}"), capture=1),
    TokenRule(TokenKind.SPC, re.compile(r"\s+"), discard=True),
    TokenRule(TokenKind.STR, re.compile(r'"([^"\\]*(\\.[^"\\]*)*)"', re.DOTALL), capture=1),
    TokenRule(TokenKind.STR, re.compile(r"'([^'\\]*(\\.[^'\\]*)*)'", re.DOTALL), capture=1),
)


def lex(source: Optional[str]) -> list[Token]:
    """Split `source` into tokens. Raises TenetInvalidToken on the first unmatched position."""
    if source is None:
        return []
    tokens: list[Token] = []
    pos = 0
    n = len(source)
    while pos < n:
        for rule in TOKEN_RULES:
            m = rule.pattern.match(source, pos)
            if m is None:
                continue
            pos = m.end()
            if not rule.discard:
                tokens.append(Token(rule.kind, m.group(rule.capture)))
            break
        else:
            raise TenetInvalidToken(source[pos:])
    return tokens
