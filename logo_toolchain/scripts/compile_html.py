#!/usr/bin/env python3
"""Compile a Logo program into an HTML page.

Reads the program from a file or stdin and writes a self-contained HTML
document whose script draws the picture on a canvas.

Usage::

    logo-compile square.logo -o square.html
    cat square.logo | logo-compile > square.html
    logo-compile square.logo --raw          # statements only, no page
"""

from __future__ import annotations

import argparse
import sys

from logo_toolchain.configs.loader import LogoConfig
from logo_toolchain.engine.compiler import Compiler
from logo_toolchain.errors import LogoError
from logo_toolchain.host.page import render_page
from logo_toolchain.scripts.common import add_common_arguments, prepare, read_source
from logo_toolchain.utils import fs, get_logger
from logo_toolchain.utils.logging_config import shutdown

logger = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compile a Logo program to HTML")
    add_common_arguments(parser)
    parser.add_argument("--output", "-o", type=str, help="Output file (default: stdout)")
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Write only the compiled statements, without the HTML page",
    )
    parser.add_argument("--title", type=str, default="Logo", help="HTML page title")
    parser.add_argument("--trace", action="store_true", help="Log each compiled command")
    args = parser.parse_args(argv)

    config = prepare(args, "compile")
    try:
        return _compile(args, config)
    finally:
        shutdown()


def _compile(args: argparse.Namespace, config: LogoConfig) -> int:
    try:
        source = read_source(args.source)
        compiled = Compiler(config, trace=args.trace or None).compile(source)
    except (LogoError, OSError) as exc:
        logger.error("%s", exc)
        return 1

    output = compiled if args.raw else render_page(compiled, config, title=args.title)

    if args.output:
        fs.atomic_write_text(args.output, output)
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
