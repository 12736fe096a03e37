import pytest

from tenet.errors import TenetArgumentError


@pytest.mark.parametrize(
    "a,expected",
    [
        (5, "big"),
        (1, "small"),
    ]
)
def test_if(itp, a, expected):
    rule = itp.compile('(if (> a 2) "big" "small")')
    assert rule({"a": a}) == expected


def test_if_only_evaluates_taken_branch(itp, probe, calls):
    rule = itp.compile('(if (> a 2) "big" (if (bump) (touch) (touch)))')
    assert rule({"a": 5, **probe}) == "big"
    assert calls == []

    assert rule({"a": 1, **probe}) == "touched"
    assert calls == ["bump", "touch"]


def test_if_without_else(itp):
    assert itp.run("(if false 1)") is None
    assert itp.run("(if true 1)") == 1


@pytest.mark.parametrize("source", ["(if)", "(if true)", "(if true 1 2 3)"])
def test_if_arity(itp, source):
    with pytest.raises(TenetArgumentError):
        itp.run(source)


@pytest.mark.parametrize(
    "a,expected",
    [
        (1, "one"),
        (2, "two"),
        (9, "other"),
    ]
)
def test_cond_with_default(itp, a, expected):
    rule = itp.compile('(cond (= a 1) "one" (= a 2) "two" "other")')
    assert rule({"a": a}) == expected


@pytest.mark.parametrize(
    "a,expected",
    [
        (1, "one"),
        (2, "two"),
        (9, None),
    ]
)
def test_cond_pairs_only(itp, a, expected):
    rule = itp.compile('(cond (= a 1) "one" (= a 2) "two")')
    assert rule({"a": a}) == expected


def test_cond_stops_at_first_true_predicate(itp, probe, calls):
    rule = itp.compile("(cond true (touch) (bump) (touch) (touch))")
    assert rule(probe) == "touched"
    assert calls == ["touch"]


@pytest.mark.parametrize("source", ["(cond)", "(cond true)", "(cond true 1)"])
def test_cond_requires_three_args(itp, source):
    with pytest.raises(TenetArgumentError):
        itp.run(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(and true 1 'x')", "x"),
        ("(and 0 '')", ""),
        ("(and true nil 1)", False),
        ("(and false)", False),
        ("(and)", True),
        ("(or false nil 3)", 3),
        ("(or nil 0)", 0),
        ("(or false nil)", False),
        ("(or)", False),
        ("(and (or false 2) (> 3 1))", True),
    ]
)
def test_and_or(itp, source, expected):
    assert itp.run(source) == expected


def test_and_short_circuits(itp, probe, calls):
    assert itp.run("(and 1 false (touch))", probe) is False
    assert calls == []


def test_or_short_circuits(itp, probe, calls):
    assert itp.run("(or nil 7 (touch))", probe) == 7
    assert calls == []
