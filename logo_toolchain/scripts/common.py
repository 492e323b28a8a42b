"""Argument and I/O plumbing shared by the command-line entry points."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from logo_toolchain.configs.loader import LogoConfig, load_config
from logo_toolchain.utils import get_logger, push_context, setup_logging

logger = get_logger(__name__)


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "source",
        nargs="?",
        help="Logo source file (default: read standard input)",
    )
    parser.add_argument("--config", "-c", type=str, help="Configuration file path")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override logging.level from the configuration",
    )


def read_source(path: str | None) -> str:
    """Return the program text from *path*, or stdin when ``None`` or ``-``.

    The source name is pushed into the logging context, so every later
    record of the run carries ``source=<name>``.
    """
    if path is None or path == "-":
        push_context(source="<stdin>")
        text = sys.stdin.read()
    else:
        push_context(source=Path(path).name)
        text = Path(path).read_text(encoding="utf-8")
    logger.debug("Read %d characters", len(text))
    return text


def prepare(args: argparse.Namespace, tool: str) -> LogoConfig:
    """Load configuration and configure logging for *tool*."""
    config = load_config(args.config)
    log_cfg = config.logging
    setup_logging(
        args.log_level or log_cfg.level,
        log_cfg.file,
        json=log_cfg.json,
        color=log_cfg.color,
        context={"tool": tool},
    )
    return config
