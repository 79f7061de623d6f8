"""Configuration management for deadswitch.

The service reads one INI file at startup:

    [Settings]
    git_repo_path = /srv/repo
    local_code_path = ~/code
    time_limit_seconds = 3600
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

from .constants import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_FILE,
    KEY_GIT_REPO_PATH,
    KEY_LOCAL_CODE_PATH,
    KEY_TIME_LIMIT,
    SETTINGS_SECTION,
)
from .errors import ConfigError
from .logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Configuration:
    """Immutable service configuration, loaded once at startup."""

    git_repo_path: Path
    local_code_path: Path
    time_limit_seconds: int

    def __post_init__(self) -> None:
        if self.time_limit_seconds <= 0:
            raise ConfigError(
                f"{KEY_TIME_LIMIT} must be a positive integer, got {self.time_limit_seconds}"
            )

    @property
    def roots(self) -> tuple[Path, Path]:
        """Directory roots in deletion order."""
        return (self.local_code_path, self.git_repo_path)


def get_config_path(path: str | Path | None = None) -> Path:
    """Resolve the config file path: explicit > environment > default."""
    if path is not None:
        return Path(path)
    return Path(os.environ.get(CONFIG_ENV_VAR, DEFAULT_CONFIG_FILE))


def _read_path(section: configparser.SectionProxy, key: str) -> Path:
    value = section.get(key, "").strip()
    if not value:
        raise ConfigError(f"Missing required key '{key}' in [{SETTINGS_SECTION}]")
    return Path(os.path.expanduser(value))


def _read_time_limit(section: configparser.SectionProxy) -> int:
    raw = section.get(KEY_TIME_LIMIT, "").strip()
    if not raw:
        raise ConfigError(f"Missing required key '{KEY_TIME_LIMIT}' in [{SETTINGS_SECTION}]")
    # Plain ASCII digits only: no sign, underscores or other scripts
    if not (raw.isascii() and raw.isdigit()):
        raise ConfigError(f"{KEY_TIME_LIMIT} must be an integer, got '{raw}'")
    return int(raw)


def load_config(path: str | Path | None = None) -> Configuration:
    """Load configuration from an INI file.

    Args:
        path: Config file path. Defaults to $DEADSWITCH_CONFIG or ./config.ini.

    Returns:
        Validated Configuration.

    Raises:
        ConfigError: If the file is missing, unreadable or malformed.
    """
    config_path = get_config_path(path)
    parser = configparser.ConfigParser(interpolation=None)

    try:
        with open(config_path, encoding="utf-8") as f:
            parser.read_file(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {config_path}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except configparser.Error as e:
        raise ConfigError(f"Cannot parse config file {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Cannot decode config file {config_path}: {e}") from e

    if not parser.has_section(SETTINGS_SECTION):
        raise ConfigError(f"Config file {config_path} has no [{SETTINGS_SECTION}] section")
    section = parser[SETTINGS_SECTION]

    config = Configuration(
        git_repo_path=_read_path(section, KEY_GIT_REPO_PATH),
        local_code_path=_read_path(section, KEY_LOCAL_CODE_PATH),
        time_limit_seconds=_read_time_limit(section),
    )
    logger.debug("Loaded configuration from %s: %s", config_path, config)
    return config
