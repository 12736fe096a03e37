from __future__ import annotations
import os
from typing import Optional


MAX_OPS_VAR = 'TENET_MAX_OPS'


def int_from_env(var: str, default: Optional[int] = None) -> Optional[int]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{var} must not be negative, got {value}")
    return value


def get_default_max_ops() -> Optional[int]:
    """Ops ceiling applied to interpreters built without an explicit max_ops."""
    return int_from_env(MAX_OPS_VAR)
