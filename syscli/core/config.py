"""Typed configuration loading.

The only tunable is the minimum diagnostic level. It is read from a small
TOML file:

  <user-config-dir>/config.toml

  [logging]
  level = "debug"

`SYSCLI_CONFIG` points at another file, `SYSCLI_LOG_LEVEL` overrides the
level from the file.
"""

from __future__ import annotations

import os
import sys
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "APP_NAME",
    "CONFIG_ENV",
    "LOG_LEVEL_ENV",
    "LOG_LEVELS",
    "Config",
    "ConfigError",
    "LoggingConfig",
    "default_config_path",
    "load_config",
    "user_config_dir",
]

APP_NAME = "syscli"
CONFIG_ENV = "SYSCLI_CONFIG"
LOG_LEVEL_ENV = "SYSCLI_LOG_LEVEL"

# Ordered from most to least verbose.
LOG_LEVELS = ("trace", "debug", "info", "warning", "error")
DEFAULT_LOG_LEVEL = "trace"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    level: str = DEFAULT_LOG_LEVEL


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: if [logging] is not a table or the log level is not
                one of LOG_LEVELS.
        """
        if "logging" in data and get_table(data, "logging") is None:
            raise ValueError("[logging] must be a table")
        logging_table: StrDict = get_table(data, "logging") or {}

        if "level" in logging_table and not isinstance(logging_table["level"], str):
            raise ValueError(f"log level must be a string, got {logging_table['level']!r}")
        level = _normalize_level(get_str(logging_table, "level") or DEFAULT_LOG_LEVEL)
        return cls(logging=LoggingConfig(level=level))


def _normalize_level(raw: str) -> str:
    level = raw.strip().lower()
    if level not in LOG_LEVELS:
        raise ValueError(f"unknown log level {raw!r} (expected one of: {', '.join(LOG_LEVELS)})")
    return level


def user_config_dir(env: Mapping[str, str] | None = None) -> Path:
    """Get the user-level configuration directory.

    Location: ~/.config/syscli/ (Linux/macOS) or ~/AppData/Roaming/syscli/ (Windows)
    """
    env = os.environ if env is None else env
    if sys.platform.startswith("win"):
        app_data = env.get("APPDATA")
        if app_data:
            return Path(app_data) / APP_NAME
        return Path.home() / "AppData" / "Roaming" / APP_NAME

    xdg_config = env.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    env = os.environ if env is None else env
    override = env.get(CONFIG_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return user_config_dir(env) / "config.toml"


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    # A missing file is not an error: defaults apply.
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        return Ok({})
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except OSError as e:
        return Err(ConfigError(f"Error reading {path}: {e}", path=path))

    try:
        data_obj: object = tomllib.loads(raw.decode("utf-8"))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Invalid UTF-8 in config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path, *, env: Mapping[str, str] | None = None) -> Result[Config, ConfigError]:
    """Load configuration from a TOML file and apply environment overrides.

    Args:
        path: Path to config.toml (may not exist)
        env: Environment to read overrides from (os.environ by default)

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    env = os.environ if env is None else env
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        config = Config.from_dict(result.value)
    except ValueError as e:
        return Err(ConfigError(f"Invalid config: {e}", path=path))

    override = env.get(LOG_LEVEL_ENV, "").strip()
    if override:
        try:
            config = Config(logging=LoggingConfig(level=_normalize_level(override)))
        except ValueError as e:
            return Err(ConfigError(f"Invalid {LOG_LEVEL_ENV}: {e}"))

    return Ok(config)
