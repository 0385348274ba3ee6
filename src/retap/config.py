"""Configuration management for retap.

Handles styles, layout margins, regex flags and the initial pattern from
retap.toml. Every section is optional; missing keys fall back to defaults.

PUBLIC API:
  - RetapConfig: Complete immutable configuration
  - StyleConfig: Highlight, error and border styles
  - LayoutConfig: Margins used by the layout sizer
  - RegexFlags: Flags applied when compiling the pattern
  - load_config: Locate and load retap.toml
"""

import logging
import os
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from rich.errors import StyleSyntaxError
from rich.style import Style

from .errors import ConfigError

__all__ = ["RetapConfig", "StyleConfig", "LayoutConfig", "RegexFlags", "load_config"]

logger = logging.getLogger(__name__)

CONFIG_NAME = "retap.toml"

# Textual border types accepted for the output panel
BORDER_TYPES = frozenset(
    [
        "ascii",
        "blank",
        "dashed",
        "double",
        "heavy",
        "hidden",
        "hkey",
        "inner",
        "none",
        "outer",
        "panel",
        "round",
        "solid",
        "tall",
        "thick",
        "vkey",
        "wide",
    ]
)

DEFAULT_HIGHLIGHT = "color(204) on color(235)"


@dataclass(frozen=True)
class StyleConfig:
    """Rendering styles threaded into the renderer and widgets."""

    highlight: Style = field(default_factory=lambda: Style.parse(DEFAULT_HIGHLIGHT))
    error: Style = field(default_factory=lambda: Style.parse(DEFAULT_HIGHLIGHT))
    border: str = "solid"


@dataclass(frozen=True)
class LayoutConfig:
    """Fixed margins subtracted from the half-height budget."""

    margin: int = 1
    border: int = 1
    padding_left: int = 3


@dataclass(frozen=True)
class RegexFlags:
    """Flags for re.compile."""

    ignore_case: bool = False
    multiline: bool = False
    dotall: bool = False
    verbose: bool = False

    def to_re_flags(self) -> re.RegexFlag:
        """Combine into a re flag value."""
        flags = re.RegexFlag(0)
        if self.ignore_case:
            flags |= re.IGNORECASE
        if self.multiline:
            flags |= re.MULTILINE
        if self.dotall:
            flags |= re.DOTALL
        if self.verbose:
            flags |= re.VERBOSE
        return flags


@dataclass(frozen=True)
class RetapConfig:
    """Complete retap configuration."""

    initial_pattern: str = "."
    placeholder: str = "regex here"
    strict_spans: bool = False
    flags: RegexFlags = field(default_factory=RegexFlags)
    style: StyleConfig = field(default_factory=StyleConfig)
    layout: LayoutConfig = field(default_factory=LayoutConfig)
    source: Optional[Path] = None


def _find_config_file() -> Optional[Path]:
    """Find retap.toml in current or parent directories, then the user config dir."""
    current = Path.cwd()

    for parent in [current] + list(current.parents):
        config_file = parent / CONFIG_NAME
        if config_file.exists():
            return config_file

    config_home = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    user_file = Path(config_home) / "retap" / CONFIG_NAME
    if user_file.exists():
        return user_file

    return None


def _load_raw(path: Path) -> dict:
    """Load raw configuration from file."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"{path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"{path}: {e.strerror or e}") from e


def _section(data: dict, name: str) -> dict:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table")
    return value


def _typed(section: dict, key: str, kind: type, default: Any) -> Any:
    value = section.get(key, default)
    # bool is an int subclass, reject it for integer settings
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise ConfigError(f"{key} must be {kind.__name__}, got {value!r}")
    return value


def _parse_style(section: dict, key: str, default: str) -> Style:
    raw = _typed(section, key, str, default)
    try:
        return Style.parse(raw)
    except StyleSyntaxError as e:
        raise ConfigError(f"invalid style for {key}: {e}") from e


def _parse_size(section: dict, key: str, default: int) -> int:
    value = _typed(section, key, int, default)
    if value < 0:
        raise ConfigError(f"{key} must not be negative, got {value}")
    return value


def parse_config(data: dict, source: Optional[Path] = None) -> RetapConfig:
    """Build RetapConfig from parsed TOML data.

    Args:
        data: Parsed TOML document
        source: File the data came from, kept for display

    Returns:
        Validated configuration

    Raises:
        ConfigError: If a value has the wrong type or is out of range
    """
    default = _section(data, "default")
    flags = _section(data, "flags")
    style = _section(data, "style")
    layout = _section(data, "layout")

    border = _typed(style, "border", str, "solid")
    if border not in BORDER_TYPES:
        raise ConfigError(f"unknown border type {border!r}")

    return RetapConfig(
        initial_pattern=_typed(default, "initial_pattern", str, "."),
        placeholder=_typed(default, "placeholder", str, "regex here"),
        strict_spans=_typed(default, "strict_spans", bool, False),
        flags=RegexFlags(
            ignore_case=_typed(flags, "ignore_case", bool, False),
            multiline=_typed(flags, "multiline", bool, False),
            dotall=_typed(flags, "dotall", bool, False),
            verbose=_typed(flags, "verbose", bool, False),
        ),
        style=StyleConfig(
            highlight=_parse_style(style, "highlight", DEFAULT_HIGHLIGHT),
            error=_parse_style(style, "error", DEFAULT_HIGHLIGHT),
            border=border,
        ),
        layout=LayoutConfig(
            margin=_parse_size(layout, "margin", 1),
            border=_parse_size(layout, "border", 1),
            padding_left=_parse_size(layout, "padding_left", 3),
        ),
        source=source,
    )


def load_config(path: Optional[Path] = None) -> RetapConfig:
    """Locate and load configuration.

    Args:
        path: Explicit config file. Searched for when None.

    Returns:
        Loaded configuration, defaults when no file exists

    Raises:
        ConfigError: If an explicit path is missing or any file is invalid
    """
    if path is None:
        path = _find_config_file()
        if path is None:
            logger.debug("No retap.toml found, using defaults")
            return RetapConfig()
    elif not path.exists():
        raise ConfigError(f"{path}: no such file")

    logger.info(f"Loading config from {path}")
    return parse_config(_load_raw(path), source=path)
