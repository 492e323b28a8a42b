"""
Logo toolchain.

Lexer, program builder and two execution engines for a minimal
turtle-graphics language: a compiler that emits host script text and an
interpreter that draws on an abstract surface.

Subpackages:
    lang: tokens, lexer, program builder
    engine: command dispatch, compiler, interpreter, turtle state
    surfaces: drawing capability with null, recording and raster backends
    host: HTML page wrapper for compiled programs
    configs: YAML configuration loading and validation
    utils: logging configuration and atomic file helpers
    scripts: command-line entry points
"""

__version__ = "1.0.0"

__all__ = ["lang", "engine", "surfaces", "host", "configs", "utils", "scripts"]
