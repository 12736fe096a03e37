from datetime import datetime, timezone

import pytest

from tenet.debug_utils.pprint import format_token, format_tokens, to_source
from tenet.reader.lexer import lex
from tenet.reader.parser import cast, read
from tenet.types.token import Token, TokenKind


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(+   1\n 2)", "(+ 1 2)"),
        ("( if (> a 2) 'big' \"small\" )", '(if (> a 2) "big" "small")'),
        ("(str 'say \"hi\"')", "(str 'say \"hi\"')"),
        ("#dt{2012-01-01}", "#dt{2012-01-01}"),
        ("((a) (b))", "((a) (b))"),
    ]
)
def test_format_tokens(source, expected):
    assert format_tokens(lex(source)) == expected


def test_format_tokens_reaches_fixed_point():
    source = "(cond (= a 1)   'one'  (= a -2.5) #dt{2020-01-01}\n nil)"
    once = format_tokens(lex(source))
    assert format_tokens(lex(once)) == once


def test_to_source():
    assert to_source(read("(if (> a 2)  'big' (str 'x' -1 2.5))")) == '(if (> a 2) "big" (str "x" -1 2.5))'


def test_to_source_datetime_leaf_reparses():
    leaf = cast(Token(TokenKind.DATETIME, "2012-01-01"))
    text = format_token(leaf)
    assert text == "#dt{2012-01-01T00:00:00+00:00}"
    assert read(text)[0].value == datetime(2012, 1, 1, tzinfo=timezone.utc)
