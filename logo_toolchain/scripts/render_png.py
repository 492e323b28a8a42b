#!/usr/bin/env python3
"""Render a Logo program to a PNG image.

Runs the interpreter on a raster surface sized from the configuration and
saves the result, with the turtle marker drawn at its final position.

Usage::

    logo-render square.logo -o square.png
    logo-render square.logo -o square.png --no-turtle
"""

from __future__ import annotations

import argparse
import sys

from logo_toolchain.configs.loader import LogoConfig
from logo_toolchain.engine.interpreter import Interpreter
from logo_toolchain.errors import LogoError
from logo_toolchain.scripts.common import add_common_arguments, prepare, read_source
from logo_toolchain.surfaces.raster import RasterSurface
from logo_toolchain.utils import get_logger
from logo_toolchain.utils.logging_config import shutdown

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render a Logo program to PNG")
    add_common_arguments(parser)
    parser.add_argument("--output", "-o", type=str, required=True, help="PNG output path")
    parser.add_argument(
        "--no-turtle",
        action="store_true",
        help="Do not draw the turtle marker",
    )
    parser.add_argument("--trace", action="store_true", help="Log each executed command")
    args = parser.parse_args(argv)

    config = prepare(args, "render")
    try:
        return _render(args, config)
    finally:
        shutdown()


def _render(args: argparse.Namespace, config: LogoConfig) -> int:
    surface = RasterSurface(config)
    interp = Interpreter(surface, config, trace=args.trace or None)

    try:
        state = interp.run(read_source(args.source))
    except (LogoError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    if not args.no_turtle:
        surface.draw_turtle(state)

    surface.save(args.output)
    logger.info("%d lines drawn", interp.lines_drawn)
    return 0


if __name__ == "__main__":
    sys.exit(main())
