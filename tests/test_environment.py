import pytest

from tenet.errors import TenetUndefinedVar
from tenet.types.environment import Environment


def test_resolve_single_frame():
    env = Environment([{"a": 1}])
    assert env.resolve("a") == 1


def test_resolve_walks_innermost_first():
    env = Environment([{"a": 1, "b": 2}])
    env.push({"a": 10})
    assert env.resolve("a") == 10
    assert env.resolve("b") == 2
    assert env.find("b") == {"a": 1, "b": 2}


def test_pop_restores_outer_binding():
    env = Environment([{"a": 1}])
    env.push({"a": 2})
    assert env.pop() == {"a": 2}
    assert env.resolve("a") == 1


def test_none_is_a_binding_not_absence():
    env = Environment([{"a": 1}])
    env.push({"a": None})
    assert env.resolve("a") is None
    assert "a" in env


def test_undefined():
    env = Environment([{"a": 1}])
    assert "b" not in env
    assert env.find("b") is None
    with pytest.raises(TenetUndefinedVar) as exc:
        env.resolve("b")
    assert exc.value.name == "b"


def test_empty_environment():
    env = Environment()
    assert len(env) == 0
    with pytest.raises(TenetUndefinedVar):
        env.resolve("anything")


def test_repr_lists_frames():
    env = Environment([{"b": 1, "a": 2}])
    env.push({"c": 3})
    assert repr(env) == "<Environment frames: {a, b} <- {c}>"
