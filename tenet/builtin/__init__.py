"""Library-wide default bindings.

DEFAULT_VARS is read-only and shared by every interpreter; instances overlay
their own overrides on a copy and never mutate it.
"""

from types import MappingProxyType
from typing import Any

from tenet.builtin.env_builtin import register
from tenet.builtin.macro_builtin import register as register_macros


def _build_defaults() -> dict[str, Any]:
    table: dict[str, Any] = {}
    register_macros(table)
    register(table)
    return table


DEFAULT_VARS = MappingProxyType(_build_defaults())

__all__ = ["DEFAULT_VARS"]
