"""Shared fixtures for the toolchain tests."""

from __future__ import annotations

import logging

import pytest

from logo_toolchain.configs.loader import LogoConfig, load_config
from logo_toolchain.surfaces.base import RecordingSurface
from logo_toolchain.utils import logging_config


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo any setup_logging() a test (or a CLI entry point) performed."""
    root = logging.getLogger()
    level = root.level
    yield
    logging_config.shutdown()
    root.setLevel(level)


@pytest.fixture()
def config() -> LogoConfig:
    """Load the default configuration shipped with the package."""
    return load_config()


@pytest.fixture()
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture()
def square_source() -> str:
    return (
        "# square\n"
        "HOME\n"
        "PEN DOWN\n"
        "REPEAT 4\n"
        "    FORWARD 100\n"
        "    RIGHT 90\n"
        "LOOP\n"
    )
