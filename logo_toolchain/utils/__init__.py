"""Cross-cutting utilities (lowest dependency layer).

This package provides shared primitives for:
    - Atomic I/O and YAML loading (fs)
    - Unified logging (logging_config)

No module in utils/ may import from upper layers (lang, engine, surfaces, ...).

Convenience imports:
    from logo_toolchain.utils import fs
    from logo_toolchain.utils.logging_config import setup_logging, get_logger
"""

from . import fs
from . import logging_config

from .logging_config import get_logger, push_context, setup_logging

__all__ = [
    'fs',
    'logging_config',
    'setup_logging',
    'get_logger',
    'push_context',
]
