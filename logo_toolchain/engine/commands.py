"""Command vocabulary shared by both engines.

Commands form a closed enumeration; each engine dispatches on it with its
own ``if``/``elif`` chain rather than through a global name-to-handler
registry.
"""

from __future__ import annotations

from enum import Enum


class Command(Enum):
    """The ten supported commands, keyed by their uppercase spelling."""

    HOME = "HOME"
    PAPER = "PAPER"
    INK = "INK"
    PEN = "PEN"
    REPEAT = "REPEAT"
    LOOP = "LOOP"
    FORWARD = "FORWARD"
    BACK = "BACK"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @classmethod
    def lookup(cls, name: str) -> Command | None:
        """Resolve *name* case-insensitively, ``None`` if unknown."""
        return cls.__members__.get(name.upper())


#: Accepted ``PEN`` arguments and the pen-down state they select.
PEN_STATES = {"UP": False, "DOWN": True}
