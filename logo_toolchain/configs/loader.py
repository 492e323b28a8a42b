"""Configuration loader for the Logo toolchain.

Loads and validates ``logo.yaml`` into typed, frozen dataclasses.  Every
section and key is optional: missing values take the defaults declared on
the dataclasses, which match the shipped ``logo.yaml``.  ``LogoConfig()``
therefore is a complete default configuration that needs no file.

Usage::

    from logo_toolchain.configs.loader import load_config
    cfg = load_config()                    # default path
    cfg = load_config("/custom/logo.yaml") # explicit path
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from logo_toolchain.colors import DEFAULT_PALETTE, Color
from logo_toolchain.utils.fs import load_yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "logo.yaml"


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Raised when configuration validation fails."""

    pass


# ---------------------------------------------------------------------------
# Dataclasses -- mirror the YAML structure
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class CanvasConfig:
    """Drawing area size in pixels."""

    width_px: int = 640
    height_px: int = 480


@dataclass(frozen=True)
class TurtleConfig:
    """Turtle start state and the marker drawn at the end of a render."""

    home_x: int = 320
    home_y: int = 240
    paper: Color = Color.BLACK
    ink: Color = Color.WHITE
    glyph_size_px: int = 10
    glyph_color: Color = Color.RED


@dataclass(frozen=True)
class LexerConfig:
    comment_symbol: str = "#"
    debug: bool = False


@dataclass(frozen=True)
class EngineConfig:
    """Dispatch-engine limits and switches.

    ``stack_capacity`` slots hold two entries per active ``REPEAT``, so the
    default of 256 allows 128 nested loops.
    """

    stack_capacity: int = 256
    max_repeat: int = 65535
    trace: bool = False
    normalize_angle: bool = True


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "INFO"
    json: bool = False
    color: bool = True
    file: str | None = None


@dataclass(frozen=True)
class LogoConfig:
    """Complete toolchain configuration loaded from ``logo.yaml``."""

    canvas: CanvasConfig = field(default_factory=CanvasConfig)
    turtle: TurtleConfig = field(default_factory=TurtleConfig)
    lexer: LexerConfig = field(default_factory=LexerConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    palette: dict[Color, tuple[int, int, int]] = field(
        default_factory=lambda: dict(DEFAULT_PALETTE)
    )
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def rgb(self, color: Color) -> tuple[int, int, int]:
        """Return the RGB triple for *color*."""
        return self.palette[color]


# ---------------------------------------------------------------------------
# Internal parsing helpers
# ---------------------------------------------------------------------------


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    raw = data.get(name) or {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Section '{name}' must be a mapping, got {type(raw).__name__}")
    return raw


def _int(raw: dict[str, Any], key: str, default: int, where: str) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"{where}.{key} must be an integer, got {value!r}")
    return value


def _bool(raw: dict[str, Any], key: str, default: bool, where: str) -> bool:
    value = raw.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{where}.{key} must be a boolean, got {value!r}")
    return value


def _color(raw: dict[str, Any], key: str, default: Color, where: str) -> Color:
    value = raw.get(key)
    if value is None:
        return default
    color = Color.from_name(str(value))
    if color is None:
        raise ConfigError(
            f"{where}.{key}: unknown color {value!r}. "
            f"Available: {[c.css for c in Color]}"
        )
    return color


def _parse_canvas(raw: dict[str, Any]) -> CanvasConfig:
    d = CanvasConfig()
    return CanvasConfig(
        width_px=_int(raw, "width_px", d.width_px, "canvas"),
        height_px=_int(raw, "height_px", d.height_px, "canvas"),
    )


def _parse_turtle(raw: dict[str, Any]) -> TurtleConfig:
    d = TurtleConfig()
    return TurtleConfig(
        home_x=_int(raw, "home_x", d.home_x, "turtle"),
        home_y=_int(raw, "home_y", d.home_y, "turtle"),
        paper=_color(raw, "paper", d.paper, "turtle"),
        ink=_color(raw, "ink", d.ink, "turtle"),
        glyph_size_px=_int(raw, "glyph_size_px", d.glyph_size_px, "turtle"),
        glyph_color=_color(raw, "glyph_color", d.glyph_color, "turtle"),
    )


def _parse_lexer(raw: dict[str, Any]) -> LexerConfig:
    d = LexerConfig()
    symbol = raw.get("comment_symbol", d.comment_symbol)
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ConfigError(
            f"lexer.comment_symbol must be a single character, got {symbol!r}"
        )
    if symbol.isalnum() or symbol.isspace() or symbol in "\"'":
        raise ConfigError(
            f"lexer.comment_symbol cannot be a letter, digit, blank or quote, got {symbol!r}"
        )
    return LexerConfig(
        comment_symbol=symbol,
        debug=_bool(raw, "debug", d.debug, "lexer"),
    )


def _parse_engine(raw: dict[str, Any]) -> EngineConfig:
    d = EngineConfig()
    return EngineConfig(
        stack_capacity=_int(raw, "stack_capacity", d.stack_capacity, "engine"),
        max_repeat=_int(raw, "max_repeat", d.max_repeat, "engine"),
        trace=_bool(raw, "trace", d.trace, "engine"),
        normalize_angle=_bool(raw, "normalize_angle", d.normalize_angle, "engine"),
    )


def _parse_palette(raw: dict[str, Any]) -> dict[Color, tuple[int, int, int]]:
    palette = dict(DEFAULT_PALETTE)
    for name, rgb in raw.items():
        color = Color.from_name(str(name))
        if color is None:
            raise ConfigError(f"palette: unknown color {name!r}")
        if (
            not isinstance(rgb, (list, tuple))
            or len(rgb) != 3
            or any(isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255 for c in rgb)
        ):
            raise ConfigError(
                f"palette.{name} must be a list of three integers in [0, 255], got {rgb!r}"
            )
        palette[color] = (int(rgb[0]), int(rgb[1]), int(rgb[2]))
    return palette


def _parse_logging(raw: dict[str, Any]) -> LoggingConfig:
    d = LoggingConfig()
    level = str(raw.get("level", d.level)).upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ConfigError(f"logging.level: unknown level {level!r}")
    log_file = raw.get("file", d.file)
    return LoggingConfig(
        level=level,
        json=_bool(raw, "json", d.json, "logging"),
        color=_bool(raw, "color", d.color, "logging"),
        file=str(log_file) if log_file is not None else None,
    )


def _validate_config(cfg: LogoConfig) -> None:
    """Cross-field checks that the per-section parsers cannot make."""
    c = cfg.canvas
    if c.width_px <= 0 or c.height_px <= 0:
        raise ConfigError(
            f"canvas size must be positive, got {c.width_px}x{c.height_px}"
        )

    t = cfg.turtle
    if not (0 <= t.home_x < c.width_px and 0 <= t.home_y < c.height_px):
        raise ConfigError(
            f"turtle home ({t.home_x}, {t.home_y}) lies outside the "
            f"{c.width_px}x{c.height_px} canvas"
        )
    if t.glyph_size_px <= 0:
        raise ConfigError(f"turtle.glyph_size_px must be > 0, got {t.glyph_size_px}")

    e = cfg.engine
    if e.stack_capacity <= 0 or e.stack_capacity % 2:
        raise ConfigError(
            f"engine.stack_capacity must be a positive even number, got {e.stack_capacity}"
        )
    if e.max_repeat <= 0:
        raise ConfigError(f"engine.max_repeat must be > 0, got {e.max_repeat}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_config(data: dict[str, Any] | None) -> LogoConfig:
    """Build a validated :class:`LogoConfig` from a raw mapping.

    Raises
    ------
    ConfigError
        If any value is malformed.
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration root must be a mapping, got {type(data).__name__}")

    config = LogoConfig(
        canvas=_parse_canvas(_section(data, "canvas")),
        turtle=_parse_turtle(_section(data, "turtle")),
        lexer=_parse_lexer(_section(data, "lexer")),
        engine=_parse_engine(_section(data, "engine")),
        palette=_parse_palette(_section(data, "palette")),
        logging=_parse_logging(_section(data, "logging")),
    )
    _validate_config(config)
    return config


def load_config(path: str | Path | None = None) -> LogoConfig:
    """Load and validate configuration from YAML.

    Parameters
    ----------
    path : str | Path | None
        Path to a ``logo.yaml``.  ``None`` loads the default shipped
        alongside this module.

    Returns
    -------
    LogoConfig
        Fully validated, frozen configuration object.

    Raises
    ------
    ConfigError
        If any field fails validation.
    FileNotFoundError
        If *path* does not exist.
    """
    path = DEFAULT_CONFIG_PATH if path is None else Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    logger.info("Loading configuration from %s", path)
    config = parse_config(load_yaml(path))
    logger.debug("Configuration loaded successfully")
    return config
