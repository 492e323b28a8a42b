"""Raster surface -- an in-memory RGB canvas backed by numpy.

Replaces a windowed viewer: the interpreter draws into a ``(H, W, 3)``
``uint8`` array, which can be exported as a Pillow image or saved as PNG.
Colors are mapped through the configured palette.  Segments are clipped to
the canvas (Liang-Barsky) and only the visible part is sampled, one point
per pixel along the longer axis, so work per line is bounded by the canvas
size however far the turtle travels.

Usage::

    surface = RasterSurface(cfg)
    Interpreter(surface, cfg).run(source)
    surface.save("drawing.png")
"""

from __future__ import annotations

import logging
import math
from pathlib import Path

import numpy as np
from PIL import Image

from logo_toolchain.colors import Color
from logo_toolchain.configs.loader import LogoConfig
from logo_toolchain.engine.state import TurtleState
from logo_toolchain.surfaces.base import DrawingSurface
from logo_toolchain.utils import fs

logger = logging.getLogger(__name__)


def _clip_span(
    x1: int, y1: int, x2: int, y2: int, width: int, height: int,
) -> tuple[float, float] | None:
    """Parameter range ``(t0, t1)`` of the segment that lies on the canvas.

    The window is widened by half a pixel on every side so that points which
    round onto an edge pixel are kept.  Returns ``None`` when the segment
    misses the canvas entirely.
    """
    dx = x2 - x1
    dy = y2 - y1
    t0, t1 = 0.0, 1.0
    for p, q in (
        (-dx, x1 + 0.5),
        (dx, width - 0.5 - x1),
        (-dy, y1 + 0.5),
        (dy, height - 0.5 - y1),
    ):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return t0, t1


class RasterSurface(DrawingSurface):
    """RGB pixel canvas.

    Parameters
    ----------
    config : LogoConfig | None
        Supplies canvas size, palette and initial paper color.

    Attributes
    ----------
    pixels : np.ndarray
        ``(height, width, 3)`` uint8 image, row 0 at the top.
    """

    def __init__(self, config: LogoConfig | None = None) -> None:
        self._cfg = config if config is not None else LogoConfig()
        self.width = self._cfg.canvas.width_px
        self.height = self._cfg.canvas.height_px
        self.pixels = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        self.clear(self._cfg.turtle.paper)

    def clear(self, paper: Color) -> None:
        self.pixels[:, :] = self._cfg.rgb(paper)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, ink: Color) -> None:
        steps = max(abs(x2 - x1), abs(y2 - y1))
        span = _clip_span(x1, y1, x2, y2, self.width, self.height)
        if span is None:
            return

        # Sample indices of the full segment that fall inside the canvas
        lo = max(math.floor(span[0] * steps), 0)
        hi = min(math.ceil(span[1] * steps), steps)
        i = np.arange(lo, hi + 1, dtype=np.float64)
        if steps:
            xs = np.rint(i * ((x2 - x1) / steps) + x1).astype(np.int64)
            ys = np.rint(i * ((y2 - y1) / steps) + y1).astype(np.int64)
        else:
            xs = np.full(i.shape, x1, dtype=np.int64)
            ys = np.full(i.shape, y1, dtype=np.int64)

        inside = (xs >= 0) & (xs < self.width) & (ys >= 0) & (ys < self.height)
        self.pixels[ys[inside], xs[inside]] = self._cfg.rgb(ink)

    def draw_turtle(self, state: TurtleState, size: float | None = None) -> None:
        """Draw the turtle marker at *state*'s position and heading."""
        if size is None:
            size = self._cfg.turtle.glyph_size_px
        for x1, y1, x2, y2 in state.glyph_segments(size):
            self.draw_line(x1, y1, x2, y2, self._cfg.turtle.glyph_color)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.pixels)

    def save(self, path: str | Path) -> None:
        """Write the canvas as an image file (format from the extension)."""
        fs.atomic_save_image(self.pixels, path)
        logger.info("Saved %dx%d canvas to %s", self.width, self.height, path)
