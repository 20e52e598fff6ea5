"""
Configuration loading following kkb_fastapi pattern.

Each environment has its own TOML file under ``app/configs``.
"""
import logging
from functools import lru_cache
from pathlib import Path

import toml

from app.utils.constants import ConfigFile

logger = logging.getLogger(__name__)

APP_DIR = Path(__file__).resolve().parent.parent
CONFIG_DIR = APP_DIR / "configs"

__all__ = ["APP_DIR", "CONFIG_DIR", "Config", "ConfigFile", "get_config"]


class Config:
    """Parsed TOML configuration for one environment."""

    def __init__(self, config_file: str):
        self.config_file = config_file
        self.path = CONFIG_DIR / config_file
        if not self.path.exists():
            raise FileNotFoundError(f"Config file not found: {self.path}")
        self.data = toml.load(self.path)

    def data_path(self, key: str) -> Path:
        """
        Resolve a file configured in the [data] section.

        Relative directories are resolved against the ``app`` package.
        """
        data_config = self.data.get("data", {})
        directory = Path(data_config.get("directory", "data"))
        if not directory.is_absolute():
            directory = APP_DIR / directory
        return directory / data_config[key]


@lru_cache
def get_config(config_file: str = ConfigFile.DEVELOPMENT) -> Config:
    """
    Load configuration for the given environment file.

    Args:
        config_file: Configuration file name (e.g., "test.toml")

    Returns:
        Config instance, cached per file name
    """
    logger.info(f"Loading configuration from {config_file}")
    return Config(config_file)
