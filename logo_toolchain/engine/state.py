"""Turtle state owned by the interpreter."""

from __future__ import annotations

import math
from dataclasses import dataclass

from logo_toolchain.colors import Color
from logo_toolchain.configs.loader import TurtleConfig


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


@dataclass
class TurtleState:
    """Position, heading, pen and colors of the turtle.

    ``angle`` is in degrees, counter-clockwise from +X in the surface's
    coordinate frame.  Positions are integer pixels.
    """

    x: int = 320
    y: int = 240
    angle: int = 0
    pen_down: bool = False
    paper: Color = Color.BLACK
    ink: Color = Color.WHITE

    @classmethod
    def initial(cls, cfg: TurtleConfig) -> TurtleState:
        return cls(x=cfg.home_x, y=cfg.home_y, paper=cfg.paper, ink=cfg.ink)

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    def home(self, cfg: TurtleConfig) -> None:
        """Back to the home position, heading 0, pen up.  Colors are kept."""
        self.x = cfg.home_x
        self.y = cfg.home_y
        self.angle = 0
        self.pen_down = False

    def displacement(self, step: int) -> tuple[int, int]:
        """Integer ``(dx, dy)`` for moving *step* pixels along the heading."""
        rad = math.radians(self.angle)
        return round_half_away(step * math.cos(rad)), round_half_away(step * math.sin(rad))

    def glyph_segments(self, size: float) -> list[tuple[int, int, int, int]]:
        """Line segments of the triangular turtle marker.

        The triangle's apex points along the heading; a short tick from the
        apex towards the centre marks the nose.
        """
        t = math.radians(self.angle)

        def at(radius: float, theta: float) -> tuple[int, int]:
            return (
                int(self.x + radius * math.cos(theta)),
                int(self.y + radius * math.sin(theta)),
            )

        a = at(size, t)
        p = at(size / 8, t)
        b = at(size, t + 2 * math.pi / 3)
        c = at(size, t - 2 * math.pi / 3)
        return [(*a, *b), (*a, *c), (*b, *c), (*a, *p)]
