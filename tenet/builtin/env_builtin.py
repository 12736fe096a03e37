from __future__ import annotations

import math
import operator
import random
import re
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from functools import reduce
from typing import Any, Callable

from tenet.errors import TenetArgumentError, TenetTypeError
from tenet.types.macro import is_truthy

_INT_PREFIX = re.compile(r"\s*[-+]?[0-9]+")
_FLOAT_PREFIX = re.compile(r"\s*[-+]?[0-9]+(\.[0-9]+)?([eE][-+]?[0-9]+)?")


def _is_number(val: Any) -> bool:
    return isinstance(val, (int, float)) and not isinstance(val, bool)


# -------------------------------
# Arithmetic
# -------------------------------
def _fold(name: str, op: Callable[[Any, Any], Any]) -> Callable[..., Any]:
    def fold(*args: Any) -> Any:
        if not args:
            raise TenetArgumentError(f"{name} requires at least 1 argument")
        if not all(_is_number(a) for a in args):
            raise TenetTypeError(f"All arguments to {name} must be numbers")
        return reduce(op, args)
    fold.__name__ = f"fold_{op.__name__}"
    return fold


add = _fold("+", operator.add)
sub = _fold("-", operator.sub)
mul = _fold("*", operator.mul)


def div(a: Any, b: Any) -> Any:
    if not (_is_number(a) and _is_number(b)):
        raise TenetTypeError("All arguments to / must be numbers")
    if isinstance(a, int) and isinstance(b, int):
        return a // b
    return a / b


def mod(a: Any, b: Any) -> Any:
    if not (_is_number(a) and _is_number(b)):
        raise TenetTypeError("All arguments to % must be numbers")
    return a % b


# -------------------------------
# Rounding
# -------------------------------
def _require_number(name: str, a: Any) -> None:
    if not _is_number(a):
        raise TenetTypeError(f"Argument to {name} must be a number, got {a!r}")
    if isinstance(a, float) and not math.isfinite(a):
        raise TenetTypeError(f"Argument to {name} must be finite, got {a!r}")


def floor(a: Any) -> int:
    _require_number("floor", a)
    return math.floor(a)


def ceil(a: Any) -> int:
    _require_number("ceil", a)
    return math.ceil(a)


def round_half_up(a: Any) -> int:
    # Halves round away from zero; integral values are returned exactly.
    _require_number("round", a)
    if isinstance(a, int):
        return a
    if a.is_integer():
        return int(a)
    return int(Decimal(a).quantize(Decimal(1), rounding=ROUND_HALF_UP))


# -------------------------------
# Comparison
# -------------------------------
def _compare(name: str, op: Callable[[Any, Any], bool]) -> Callable[[Any, Any], bool]:
    def compare(a: Any, b: Any) -> bool:
        if isinstance(a, bool) or isinstance(b, bool):
            raise TenetTypeError(f"Cannot compare {to_s(a)} {name} {to_s(b)}")
        try:
            return op(a, b)
        except TypeError as e:
            raise TenetTypeError(f"Cannot compare {a!r} {name} {b!r}") from e
    compare.__name__ = op.__name__
    return compare


gt = _compare(">", operator.gt)
lt = _compare("<", operator.lt)
gte = _compare(">=", operator.ge)
lte = _compare("<=", operator.le)


def _same(a: Any, b: Any) -> bool:
    # Booleans never equal numbers, also inside sequences.
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(_same(x, y) for x, y in zip(a, b))
    return a == b


def equals(a: Any, b: Any) -> bool:
    return _same(a, b)


def not_equals(a: Any, b: Any) -> bool:
    return not _same(a, b)


def logical_not(a: Any) -> bool:
    return not is_truthy(a)


def identity(a: Any) -> Any:
    return a


# -------------------------------
# Sequences
# -------------------------------
def _require_sequence(name: str, seq: Any) -> None:
    if not isinstance(seq, (list, tuple, str)):
        raise TenetTypeError(f"Argument to {name} must be a sequence, got {seq!r}")


def array(*args: Any) -> list[Any]:
    return list(args)


def _extreme(name: str, pick: Callable[..., Any]) -> Callable[[Any], Any]:
    def extreme(seq: Any) -> Any:
        _require_sequence(name, seq)
        if len(seq) > 1 and any(isinstance(v, bool) for v in seq):
            raise TenetTypeError(f"Cannot order booleans in {name}")
        try:
            return pick(seq, default=None)
        except TypeError as e:
            raise TenetTypeError(f"Cannot order the elements passed to {name}") from e
    extreme.__name__ = f"seq_{name}"
    return extreme


seq_max = _extreme("max", max)
seq_min = _extreme("min", min)


def first(seq: Any) -> Any:
    _require_sequence("first", seq)
    return seq[0] if seq else None


def last(seq: Any) -> Any:
    _require_sequence("last", seq)
    return seq[-1] if seq else None


def length(seq: Any) -> int:
    _require_sequence("length", seq)
    return len(seq)


# -------------------------------
# Coercion and text
# -------------------------------
def to_i(a: Any) -> int:
    if a is None:
        return 0
    if isinstance(a, str):
        m = _INT_PREFIX.match(a)
        return int(m.group(0)) if m else 0
    _require_number("to_i", a)
    return int(a)


def to_f(a: Any) -> float:
    if a is None:
        return 0.0
    if isinstance(a, str):
        m = _FLOAT_PREFIX.match(a)
        return float(m.group(0)) if m else 0.0
    if not _is_number(a):
        raise TenetTypeError(f"Argument to to_f must be a number, got {a!r}")
    return float(a)


def to_s(a: Any) -> str:
    if a is None:
        return ""
    if isinstance(a, bool):
        return "true" if a else "false"
    return str(a)


def _require_text(name: str, a: Any) -> None:
    if not isinstance(a, str):
        raise TenetTypeError(f"Argument to {name} must be text, got {a!r}")


def upcase(a: Any) -> str:
    _require_text("upcase", a)
    return a.upper()


def downcase(a: Any) -> str:
    _require_text("downcase", a)
    return a.lower()


def concat(*args: Any) -> str:
    return "".join(to_s(a) for a in args)


# -------------------------------
# Sources
# -------------------------------
def rand() -> float:
    return random.random()


def now() -> datetime:
    return datetime.now(timezone.utc)


# -------------------------------
# Registration
# -------------------------------
def register(table: dict[str, Any]) -> None:
    table.update({
        'array': array,
        'identity': identity,
        'not': logical_not,
        '!': logical_not,
        '>': gt,
        '<': lt,
        '>=': gte,
        '<=': lte,
        '=': equals,
        '!=': not_equals,
        'true': True,
        'false': False,
        'nil': None,
        '+': add,
        '-': sub,
        '*': mul,
        '/': div,
        '%': mod,
        'floor': floor,
        'ceil': ceil,
        'round': round_half_up,
        'max': seq_max,
        'min': seq_min,
        'first': first,
        'last': last,
        'length': length,
        'to_i': to_i,
        'to_f': to_f,
        'rand': rand,
        'upcase': upcase,
        'downcase': downcase,
        'now': now,
        'str': concat,
    })
