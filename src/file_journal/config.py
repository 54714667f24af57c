"""Configuration management for file-journal."""

import logging
from dataclasses import asdict, dataclass
from pathlib import Path

import toml
from platformdirs import user_config_dir

from .errors import ConfigInvalidError, ConfigMissingError

logger = logging.getLogger(__name__)

APP_NAME = "file-journal"
CONFIG_ENV_VAR = "FILE_JOURNAL_CONFIG"
LOCAL_CONFIG_FILE = Path(".file-journal.toml")


def default_config_file() -> Path:
    """Per-user config file, e.g. ~/.config/file-journal/config.toml on Linux."""
    return Path(user_config_dir(APP_NAME)) / "config.toml"


@dataclass
class Config:
    """file-journal configuration."""

    default_path: str = ""

    @property
    def journal_dir(self) -> Path:
        return Path(self.default_path).expanduser()


def find_config_file(config_file: Path | None = None) -> Path | None:
    """
    Locate the config file to use.

    An explicit path is used as-is (None if it does not exist). Otherwise
    ./.file-journal.toml wins over the per-user config file.
    """
    if config_file is not None:
        return config_file if config_file.exists() else None

    for candidate in (LOCAL_CONFIG_FILE, default_config_file()):
        if candidate.exists():
            return candidate
        logger.debug(f"No config at {candidate}")
    return None


def parse_config(text: str, source: Path | str = "config") -> Config:
    """Parse TOML config text. Raises ConfigInvalidError on bad content."""
    try:
        data = toml.loads(text)
    except toml.TomlDecodeError as e:
        raise ConfigInvalidError(f"{source}: invalid TOML: {e}") from e

    for key in data:
        if key != "default_path":
            logger.debug(f"{source}: ignoring unknown key {key!r}")

    value = data.get("default_path")
    if value is None:
        raise ConfigInvalidError(f"{source}: missing 'default_path'")
    if not isinstance(value, str) or not value.strip():
        raise ConfigInvalidError(f"{source}: 'default_path' must be a non-empty string")

    return Config(default_path=value.strip())


def load_config(config_file: Path | None = None) -> Config:
    """
    Load configuration from the first config file found.

    Raises:
        ConfigMissingError: no config file exists
        ConfigInvalidError: the file is malformed or lacks default_path
    """
    path = find_config_file(config_file)
    if path is None:
        if config_file is not None:
            raise ConfigMissingError(f"Config file {config_file} not found")
        raise ConfigMissingError(
            "No journal path specified. Use --path or set up config with 'init'"
        )

    logger.debug(f"Loading config from {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigInvalidError(f"{path}: not valid UTF-8") from e
    return parse_config(text, source=path)


def save_config(config: Config, config_file: Path | None = None) -> Path:
    """Write config as TOML, creating parent directories. Returns the path."""
    path = config_file or default_config_file()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(toml.dumps(asdict(config)), encoding="utf-8")
    logger.debug(f"Saved config to {path}")
    return path
