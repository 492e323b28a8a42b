"""Drawing capability consumed by the interpreter.

A surface only needs two operations: clear itself to a paper color and draw
a one-pixel line between two absolute integer points in an ink color.  The
interpreter calls them synchronously, in program order, and ignores any
return value.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from logo_toolchain.colors import Color


class DrawingSurface(ABC):
    """Abstract drawing surface."""

    @abstractmethod
    def clear(self, paper: Color) -> None:
        """Reset the whole surface to *paper*."""

    @abstractmethod
    def draw_line(self, x1: int, y1: int, x2: int, y2: int, ink: Color) -> None:
        """Draw a segment from ``(x1, y1)`` to ``(x2, y2)`` in *ink*."""


class NullSurface(DrawingSurface):
    """Surface that discards every call."""

    def clear(self, paper: Color) -> None:
        pass

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, ink: Color) -> None:
        pass


# ---------------------------------------------------------------------------
# Recording
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ClearCall:
    paper: Color


@dataclass(frozen=True, slots=True)
class LineCall:
    x1: int
    y1: int
    x2: int
    y2: int
    ink: Color

    @property
    def endpoints(self) -> tuple[int, int, int, int]:
        return self.x1, self.y1, self.x2, self.y2


class RecordingSurface(DrawingSurface):
    """Surface that remembers every call, in order.

    Attributes
    ----------
    calls : list[ClearCall | LineCall]
        Calls received since construction or the last :meth:`reset`.
    """

    def __init__(self) -> None:
        self.calls: list[ClearCall | LineCall] = []

    def clear(self, paper: Color) -> None:
        self.calls.append(ClearCall(paper))

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, ink: Color) -> None:
        self.calls.append(LineCall(x1, y1, x2, y2, ink))

    @property
    def lines(self) -> list[LineCall]:
        return [c for c in self.calls if isinstance(c, LineCall)]

    @property
    def clears(self) -> list[ClearCall]:
        return [c for c in self.calls if isinstance(c, ClearCall)]

    def reset(self) -> None:
        self.calls.clear()
