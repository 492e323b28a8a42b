#!/usr/bin/env python3
"""Trace a Logo program without drawing anything.

Runs the interpreter on a recording surface with command tracing enabled,
then logs the final turtle state and a summary of the drawing calls.

Usage::

    logo-trace square.logo
    logo-trace --log-level DEBUG < square.logo
"""

from __future__ import annotations

import argparse
import sys

from logo_toolchain.configs.loader import LogoConfig
from logo_toolchain.engine.interpreter import Interpreter
from logo_toolchain.errors import LogoError
from logo_toolchain.scripts.common import add_common_arguments, prepare, read_source
from logo_toolchain.surfaces.base import RecordingSurface
from logo_toolchain.utils import get_logger
from logo_toolchain.utils.logging_config import shutdown

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Trace a Logo program")
    add_common_arguments(parser)
    parser.add_argument(
        "--lines",
        action="store_true",
        help="Also log every line segment drawn",
    )
    args = parser.parse_args(argv)

    config = prepare(args, "trace")
    try:
        return _trace(args, config)
    finally:
        shutdown()


def _trace(args: argparse.Namespace, config: LogoConfig) -> int:
    surface = RecordingSurface()
    interp = Interpreter(surface, config, trace=True)

    try:
        state = interp.run(read_source(args.source))
    except (LogoError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    if args.lines:
        for call in surface.lines:
            logger.info(
                "LINE (%d, %d) -> (%d, %d) %s",
                *call.endpoints,
                call.ink.css,
            )

    logger.info(
        "Final state: x=%d y=%d angle=%d pen=%s paper=%s ink=%s",
        state.x,
        state.y,
        state.angle,
        "down" if state.pen_down else "up",
        state.paper.css,
        state.ink.css,
    )
    logger.info(
        "%d commands, %d lines drawn, %d clears",
        interp.commands_executed,
        len(surface.lines),
        len(surface.clears),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
