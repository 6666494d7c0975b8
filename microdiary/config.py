"""Configuration for Micro Diary.

Settings live in a toml file, ``~/.config/microdiary/config.toml`` by
default (``MICRODIARY_CONFIG`` points elsewhere)::

    [storage]
    db_path = "~/.config/microdiary/microdiary.db"

    [premium]
    enabled = false

    [logging]
    level = "WARNING"
"""

import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "microdiary"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.toml"
DEFAULT_DB_PATH = CONFIG_DIR / "microdiary.db"


class StorageConfig(BaseModel):
    """Where entries and badges are kept."""

    db_path: Path = Field(default=DEFAULT_DB_PATH, description="SQLite database file")


class PremiumConfig(BaseModel):
    """Entitlement flag mirrored from the subscription service."""

    enabled: bool = Field(default=False, description="Extended features unlocked")


class LoggingConfig(BaseModel):
    """Log verbosity."""

    level: str = Field(default="WARNING", description="Root log level name")


class DiaryConfig(BaseModel):
    """Top-level configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    premium: PremiumConfig = Field(default_factory=PremiumConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def db_path(self) -> Path:
        return self.storage.db_path.expanduser()


def get_config_path() -> Path:
    """Get the config file location."""
    override = os.getenv("MICRODIARY_CONFIG")
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(config_path: Optional[Path] = None) -> DiaryConfig:
    """Load configuration, falling back to defaults.

    A missing or unparsable file, or one holding invalid values, yields
    the default configuration.

    Args:
        config_path: Optional file to read. Uses get_config_path() if None.

    Returns:
        Parsed configuration.
    """
    import toml

    path = config_path or get_config_path()
    if not path.exists():
        return DiaryConfig()

    try:
        data = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Could not read config %s: %s", path, e)
        return DiaryConfig()

    try:
        return DiaryConfig.model_validate(data)
    except ValidationError as e:
        logger.warning("Invalid config %s, using defaults: %s", path, e)
        return DiaryConfig()
