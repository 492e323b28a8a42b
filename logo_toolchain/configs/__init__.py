"""Toolchain configuration loading and validation."""

from logo_toolchain.configs.loader import (
    CanvasConfig,
    ConfigError,
    EngineConfig,
    LexerConfig,
    LoggingConfig,
    LogoConfig,
    TurtleConfig,
    load_config,
    parse_config,
)

__all__ = [
    "CanvasConfig",
    "ConfigError",
    "EngineConfig",
    "LexerConfig",
    "LoggingConfig",
    "LogoConfig",
    "TurtleConfig",
    "load_config",
    "parse_config",
]
