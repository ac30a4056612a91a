r"""
TOML configuration for greek_ime.

Usage:
    from greek_ime.config import load_settings

    settings = load_settings()                  # greek_ime.toml if present
    settings = load_settings("other.toml")      # explicit path must exist

Example greek_ime.toml:

    [matcher]
    escape = "\\"

    [logging]
    level = "WARNING"
"""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_CONFIG = "greek_ime.toml"

_MATCHER_KEYS = {"escape"}

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigError(ValueError):
    """A config file that parses but holds unusable values."""


@dataclass(slots=True)
class Settings:
    escape: str | None = "\\"
    log_level: str = "WARNING"
    source: Path | None = None  # file the settings came from, if any

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)


def find_default_config() -> Path | None:
    """Look for greek_ime.toml in the CWD."""
    candidate = Path(DEFAULT_CONFIG)
    if candidate.exists():
        return candidate
    return None


def load_settings(config_path: str | Path | None = None) -> Settings:
    """Load settings from a TOML file.

    With no path, greek_ime.toml in the CWD is used if present and defaults
    otherwise.  An explicit path that does not exist is an error.
    """
    if config_path is None:
        config_path = find_default_config()
        if config_path is None:
            return Settings()

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")

    with config_path.open("rb") as f:
        cfg = tomllib.load(f)

    return settings_from_dict(cfg, source=config_path)


def settings_from_dict(cfg: dict, source: Path | None = None) -> Settings:
    """Validate a parsed config mapping into Settings."""
    settings = Settings(source=source)

    matcher_cfg = cfg.get("matcher", {})
    unknown = sorted(set(matcher_cfg) - _MATCHER_KEYS)
    if unknown:
        raise ConfigError(f"[matcher] unknown setting(s): {', '.join(unknown)}")
    if "escape" in matcher_cfg:
        escape = matcher_cfg["escape"]
        # An empty string disables the escape marker.
        if escape == "":
            settings.escape = None
        elif isinstance(escape, str) and len(escape) == 1:
            settings.escape = escape
        else:
            raise ConfigError(f"[matcher] escape must be a single character, got {escape!r}")

    log_cfg = cfg.get("logging", {})
    if "level" in log_cfg:
        level = str(log_cfg["level"]).upper()
        if level not in _LEVELS:
            raise ConfigError(f"[logging] level must be one of {sorted(_LEVELS)}, got {level!r}")
        settings.log_level = level

    return settings
