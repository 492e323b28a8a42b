"""The eight named colors of the language.

The compiler embeds a color by its lowercase name (valid CSS); the
interpreter hands the enumeration value to the drawing surface, which maps
it to pixels through the configured palette.
"""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    BLACK = 0
    WHITE = 1
    RED = 2
    GREEN = 3
    BLUE = 4
    YELLOW = 5
    GRAY = 6
    MAGENTA = 7

    @property
    def css(self) -> str:
        """Lowercase spelling used in emitted script text."""
        return self.name.lower()

    @classmethod
    def from_name(cls, name: str) -> Color | None:
        """Resolve *name* case-insensitively, ``None`` if unknown."""
        return cls.__members__.get(name.upper())


#: Default RGB palette used by raster surfaces.
DEFAULT_PALETTE: dict[Color, tuple[int, int, int]] = {
    Color.BLACK: (0x00, 0x00, 0x00),
    Color.WHITE: (0xFF, 0xFF, 0xFF),
    Color.RED: (0xFF, 0x00, 0x00),
    Color.GREEN: (0x00, 0xFF, 0x00),
    Color.BLUE: (0x00, 0x00, 0xFF),
    Color.YELLOW: (0xFF, 0xFF, 0x00),
    Color.GRAY: (0x88, 0x88, 0x88),
    Color.MAGENTA: (0xFF, 0x00, 0xFF),
}
