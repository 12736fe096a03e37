import pytest

from tenet.interpreter import Interpreter
from tenet.types.macro import Macro
from tenet.types.token import qvar


@pytest.fixture(autouse=True)
def _no_env_ceiling(monkeypatch):
    # Keep a developer's TENET_MAX_OPS from leaking into tests.
    monkeypatch.delenv("TENET_MAX_OPS", raising=False)


@pytest.fixture
def itp():
    """Fresh interpreter with the default bindings."""
    return Interpreter()


@pytest.fixture
def calls():
    return []


@pytest.fixture
def probe(calls):
    """Bindings that record when they are evaluated.

    `(bump)` is a macro and `(touch)` a function; both append to `calls`.
    """
    def bump(evaluator):
        calls.append("bump")
        return qvar("true")

    def touch():
        calls.append("touch")
        return "touched"

    return {"bump": Macro(bump), "touch": touch}
