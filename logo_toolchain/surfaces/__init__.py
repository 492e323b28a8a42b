"""
Drawing surfaces.

The abstract capability the interpreter draws on, plus null, recording and
raster (numpy/PNG) implementations.
"""

from logo_toolchain.surfaces.base import (
    ClearCall,
    DrawingSurface,
    LineCall,
    NullSurface,
    RecordingSurface,
)
from logo_toolchain.surfaces.raster import RasterSurface

__all__ = [
    "ClearCall",
    "DrawingSurface",
    "LineCall",
    "NullSurface",
    "RasterSurface",
    "RecordingSurface",
]
