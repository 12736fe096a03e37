"""Binding environment for Tenet.

An Environment is an ordered stack of frames, each a plain mapping of names to
evaluated values. Lookups walk the stack from the most recently pushed frame
to the oldest and return the value from the first frame holding the name;
frames are never merged.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Mapping, Optional

from tenet import LispValue
from tenet.errors import TenetUndefinedVar


class Environment:
    """Stack of name -> value frames searched innermost first."""

    __slots__ = ("frames",)

    def __init__(self, frames: Iterable[Mapping[str, LispValue]] = ()):
        self.frames: list[Mapping[str, LispValue]] = list(frames)

    def push(self, frame: Mapping[str, LispValue]) -> None:
        self.frames.append(frame)

    def pop(self) -> Mapping[str, LispValue]:
        return self.frames.pop()

    def find(self, name: str) -> Optional[Mapping[str, LispValue]]:
        """Find the nearest frame that contains `name`."""
        for frame in reversed(self.frames):
            if name in frame:
                return frame
        return None

    def resolve(self, name: str) -> LispValue:
        """Look up the value bound to `name`.

        Raises TenetUndefinedVar if no frame contains it.
        """
        frame = self.find(name)
        if frame is None:
            raise TenetUndefinedVar(name)
        return frame[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def __len__(self) -> int:
        return len(self.frames)

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment frames: ")
            buffer.write(" <- ".join("{" + ", ".join(sorted(f)) + "}" for f in self.frames))
            buffer.write(">")
            return buffer.getvalue()
